"""c2pa-remover — detect and strip C2PA provenance metadata.

This package exposes two layers:

1. **Buffer API**: ``has_c2pa`` and ``remove_c2pa`` operate on raw
   JPEG/PNG bytes and never touch the filesystem.
2. **File API**: ``has_c2pa_metadata`` and ``remove_c2pa_metadata``
   wrap the buffer API for image paths.
"""

__version__ = "0.1.0"

from metadata_handler import (
    C2PARemoverError,
    ImageFormat,
    RemovalFailedError,
    UnsupportedFormatError,
    detect_image_format,
    has_c2pa,
    has_c2pa_metadata,
    is_supported_format,
    remove_c2pa,
    remove_c2pa_metadata,
)

__all__ = [
    "C2PARemoverError",
    "ImageFormat",
    "RemovalFailedError",
    "UnsupportedFormatError",
    "detect_image_format",
    "has_c2pa",
    "has_c2pa_metadata",
    "is_supported_format",
    "remove_c2pa",
    "remove_c2pa_metadata",
]
