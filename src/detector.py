"""Read-only C2PA detection for JPEG and PNG images.

``has_c2pa`` is a pure predicate over a byte buffer and never raises:
empty, missing, or unrecognised input is simply reported as clean.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jpeg_segments import has_c2pa_jpeg
from png_chunks import has_c2pa_png
from utils import ImageFormat, detect_image_format

logger = logging.getLogger(__name__)


def has_c2pa(data: bytes | None) -> bool:
    """
    Check if an image buffer contains C2PA metadata.

    Args:
        data: Raw image bytes.

    Returns:
        True if C2PA metadata is detected, False otherwise.
    """
    image_format = detect_image_format(data)

    if image_format is ImageFormat.JPEG:
        return has_c2pa_jpeg(data)
    if image_format is ImageFormat.PNG:
        return has_c2pa_png(data)
    return False


def has_c2pa_metadata(image_path: Path) -> bool:
    """
    Check if an image file contains C2PA metadata.

    Args:
        image_path: Path to the image file.

    Returns:
        True if C2PA metadata is detected, False otherwise (including
        when the file cannot be read).
    """
    try:
        data = Path(image_path).read_bytes()
    except OSError:
        logger.debug("Could not read %s", image_path, exc_info=True)
        return False
    return has_c2pa(data)
