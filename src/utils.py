"""Low-level utility helpers used across the removal pipeline.

Only format detection and path helpers live here; this module depends
on nothing but ``constants``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from constants import JPEG_SIGNATURE, PNG_SIGNATURE, SUPPORTED_FORMATS


class ImageFormat(Enum):
    """Image formats recognised by signature bytes."""

    JPEG = "JPEG"
    PNG = "PNG"
    UNSUPPORTED = "UNSUPPORTED"


def detect_image_format(data: bytes | None) -> ImageFormat:
    """
    Identify an image buffer by its leading signature bytes.

    Args:
        data: Raw image bytes. ``None`` and empty buffers are accepted.

    Returns:
        ``ImageFormat.JPEG``, ``ImageFormat.PNG`` or ``ImageFormat.UNSUPPORTED``.
    """
    if not data:
        return ImageFormat.UNSUPPORTED
    if data[:2] == JPEG_SIGNATURE:
        return ImageFormat.JPEG
    if data[:8] == PNG_SIGNATURE:
        return ImageFormat.PNG
    return ImageFormat.UNSUPPORTED


def is_supported_format(file_path: Path) -> bool:
    """
    Check if the file format is supported.

    Args:
        file_path: Path to the image file.

    Returns:
        True if the format is supported, False otherwise.
    """
    return file_path.suffix.lower() in SUPPORTED_FORMATS


def get_cleaned_path(source_path: Path) -> Path:
    """Return ``<stem>_cleaned<suffix>`` next to *source_path*."""
    return source_path.with_name(f"{source_path.stem}_cleaned{source_path.suffix}")
