"""Pillow decode/re-encode round trip ("Smart Mode").

Re-encoding drops every ancillary block the encoder is not explicitly
handed: EXIF, XMP, ICC profiles, PNG text chunks and C2PA containers.
Nothing from ``img.info`` is forwarded to ``save``; ``exif`` and
``icc_profile`` are passed empty because Pillow otherwise copies them
from the decoded image.  The orchestrator treats any failure here as
"strategy unavailable" and falls back to segment surgery.
"""

from __future__ import annotations

import io
import logging

from PIL import Image, features

from constants import JPEG_REENCODE_QUALITY, PNG_COMPRESS_LEVEL
from errors import DecodeFailureError
from utils import ImageFormat

logger = logging.getLogger(__name__)

# Modes the JPEG encoder accepts without conversion
_JPEG_MODES = ("RGB", "L", "CMYK")

# Pillow codecs needed to write JPEG and PNG
_REQUIRED_CODECS = ("jpg", "zlib")


def is_reencode_available() -> bool:
    """Check if Pillow was built with the JPEG and PNG codecs."""
    return all(features.check_codec(codec) for codec in _REQUIRED_CODECS)


def reencode_image(
    data: bytes,
    image_format: ImageFormat,
    quality: int = JPEG_REENCODE_QUALITY,
) -> bytes:
    """
    Decode *data* and encode it again without metadata.

    Args:
        data: Raw JPEG or PNG bytes.
        image_format: Format to encode to; matches the input format.
        quality: JPEG quality (1-100). Ignored for PNG, which is lossless.

    Returns:
        The re-encoded image bytes.

    Raises:
        DecodeFailureError: If Pillow cannot decode the input or encode
            the result.
    """
    if image_format not in (ImageFormat.JPEG, ImageFormat.PNG):
        raise DecodeFailureError(f"Cannot re-encode format: {image_format.value}")

    output = io.BytesIO()
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()

            if image_format is ImageFormat.JPEG:
                if img.mode not in _JPEG_MODES:
                    img = img.convert("RGB")
                img.save(output, format="JPEG", quality=quality, exif=b"", icc_profile=None)
            else:
                img.save(
                    output,
                    format="PNG",
                    compress_level=PNG_COMPRESS_LEVEL,
                    exif=b"",
                    icc_profile=None,
                )
    except Exception as e:
        raise DecodeFailureError(f"Failed to re-encode image: {e}") from e

    logger.debug("Re-encoded %s: %d -> %d bytes", image_format.value, len(data), output.tell())
    return output.getvalue()
