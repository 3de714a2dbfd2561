"""Public façade for the C2PA pipeline — re-exports every symbol.

Consumers should ``import metadata_handler`` rather than reaching into
the internal modules directly.  This file gathers all public names so
that the API surface stays stable even as the implementation is
reorganised.

Internal modules:

- ``constants``      — signatures, markers, and detection vocabulary
- ``errors``         — exception hierarchy
- ``utils``          — format sniffing and path helpers
- ``c2pa``           — provenance text classifier
- ``jpeg_segments``  — JPEG marker walker, detector, and remover
- ``png_chunks``     — PNG chunk walker, detector, and remover
- ``detector``       — format-dispatching detection
- ``reencoder``      — Pillow re-encode strategy
- ``cleaner``        — removal orchestrator
"""

from c2pa import has_c2pa_marker, is_c2pa_payload, is_c2pa_text
from cleaner import remove_c2pa, remove_c2pa_metadata, save_cleaned_image
from constants import (
    C2PA_CLAIM_TAG,
    C2PA_MANIFEST_TAG,
    C2PA_NAMESPACE,
    C2PA_TEXT_MARKERS,
    JPEG_SIGNATURE,
    PNG_SIGNATURE,
    SUPPORTED_FORMATS,
    XMP_PREFIX,
)
from detector import has_c2pa, has_c2pa_metadata
from errors import (
    C2PARemoverError,
    DecodeFailureError,
    RemovalFailedError,
    UnsupportedFormatError,
)
from jpeg_segments import (
    JpegSegment,
    SegmentKind,
    has_c2pa_jpeg,
    iter_segments,
    remove_c2pa_jpeg,
)
from png_chunks import (
    PngChunk,
    extract_png_chunks,
    has_c2pa_png,
    iter_chunks,
    remove_c2pa_png,
)
from reencoder import is_reencode_available, reencode_image
from utils import ImageFormat, detect_image_format, get_cleaned_path, is_supported_format

__all__ = [
    # Constants
    "SUPPORTED_FORMATS",
    "JPEG_SIGNATURE",
    "PNG_SIGNATURE",
    "XMP_PREFIX",
    "C2PA_NAMESPACE",
    "C2PA_MANIFEST_TAG",
    "C2PA_CLAIM_TAG",
    "C2PA_TEXT_MARKERS",
    # Errors
    "C2PARemoverError",
    "UnsupportedFormatError",
    "DecodeFailureError",
    "RemovalFailedError",
    # Utils
    "ImageFormat",
    "detect_image_format",
    "is_supported_format",
    "get_cleaned_path",
    # Classifier
    "has_c2pa_marker",
    "is_c2pa_text",
    "is_c2pa_payload",
    # JPEG
    "JpegSegment",
    "SegmentKind",
    "iter_segments",
    "has_c2pa_jpeg",
    "remove_c2pa_jpeg",
    # PNG
    "PngChunk",
    "iter_chunks",
    "extract_png_chunks",
    "has_c2pa_png",
    "remove_c2pa_png",
    # Detection / removal
    "has_c2pa",
    "has_c2pa_metadata",
    "reencode_image",
    "is_reencode_available",
    "save_cleaned_image",
    "remove_c2pa",
    "remove_c2pa_metadata",
]
