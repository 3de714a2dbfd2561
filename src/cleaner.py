"""C2PA metadata removal.

The removal pipeline:
1. Identifies the image format by signature; anything other than JPEG
   or PNG is rejected with ``UnsupportedFormatError``.
2. Tries a Pillow re-encode ("Smart Mode"). A non-empty result in the
   same format in which no C2PA is detected is returned as-is, since it also sheds EXIF and
   other ancillary metadata.
3. Otherwise falls back to format-specific segment surgery, which copies
   every structural segment/chunk and drops only the provenance ones.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from constants import JPEG_REENCODE_QUALITY, PNG_REENCODE_QUALITY
from detector import has_c2pa
from errors import UnsupportedFormatError
from jpeg_segments import remove_c2pa_jpeg
from png_chunks import remove_c2pa_png
from reencoder import reencode_image
from utils import ImageFormat, detect_image_format, get_cleaned_path

logger = logging.getLogger(__name__)

Reencoder = Callable[[bytes, ImageFormat, int], bytes]

REENCODE_QUALITY: dict[ImageFormat, int] = {
    ImageFormat.JPEG: JPEG_REENCODE_QUALITY,
    ImageFormat.PNG: PNG_REENCODE_QUALITY,
}

_FALLBACK_REMOVERS: dict[ImageFormat, Callable[[bytes], bytes]] = {
    ImageFormat.JPEG: remove_c2pa_jpeg,
    ImageFormat.PNG: remove_c2pa_png,
}


def remove_c2pa(
    data: bytes | None,
    smart: bool = True,
    reencoder: Reencoder | None = reencode_image,
) -> bytes:
    """
    Remove C2PA metadata from an image buffer.

    Args:
        data: Raw JPEG or PNG bytes.
        smart: If True, try a full re-encode before segment surgery.
        reencoder: Decode/re-encode collaborator. ``None`` disables
            Smart Mode just like ``smart=False``.

    Returns:
        The cleaned image bytes. For a PNG with nothing to remove on the
        fallback path this is *data* itself.

    Raises:
        UnsupportedFormatError: If *data* is empty, missing, or not JPEG/PNG.
        RemovalFailedError: If segment surgery cannot verify a clean result.
    """
    image_format = detect_image_format(data)
    if image_format is ImageFormat.UNSUPPORTED:
        raise UnsupportedFormatError("Unsupported image format")

    if smart and reencoder is not None:
        cleaned = _try_reencode(data, image_format, reencoder)
        if cleaned is not None:
            return cleaned

    return _FALLBACK_REMOVERS[image_format](data)


def _try_reencode(data: bytes, image_format: ImageFormat, reencoder: Reencoder) -> bytes | None:
    """Run *reencoder* and return its output only if it is verifiably clean."""
    try:
        cleaned = reencoder(data, image_format, REENCODE_QUALITY[image_format])
    except Exception:
        logger.debug("Re-encode failed, falling back to segment surgery", exc_info=True)
        return None

    if not cleaned:
        logger.debug("Re-encode produced no output, falling back to segment surgery")
        return None
    if detect_image_format(cleaned) is not image_format:
        logger.debug("Re-encode changed the image format, falling back to segment surgery")
        return None
    if has_c2pa(cleaned):
        logger.debug("C2PA still present after re-encode, falling back to segment surgery")
        return None
    return cleaned


def remove_c2pa_metadata(
    source_path: Path,
    output_path: Path | None = None,
    smart: bool = True,
) -> Path:
    """
    Remove C2PA metadata from an image file.

    Args:
        source_path: Path to the source image file.
        output_path: Optional output path. Defaults to
            ``<stem>_cleaned<suffix>`` next to the source.
        smart: If True, try a full re-encode before segment surgery.

    Returns:
        Path to the output file with C2PA metadata removed.
    """
    source_path = Path(source_path)
    cleaned = remove_c2pa(source_path.read_bytes(), smart=smart)
    return save_cleaned_image(source_path, cleaned, output_path)


def save_cleaned_image(source_path: Path, cleaned: bytes, output_path: Path | None = None) -> Path:
    """
    Write *cleaned* bytes next to *source_path* or to *output_path*.

    Parent directories of the output are created as needed.

    Returns:
        Path the cleaned image was written to.
    """
    if output_path is None:
        output_path = get_cleaned_path(Path(source_path))
    output_path = Path(output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(cleaned)
    logger.debug("Wrote %d bytes to %s", len(cleaned), output_path)

    return output_path
