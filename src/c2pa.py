"""C2PA (Coalition for Content Provenance and Authenticity) text classifier.

C2PA manifests show up in images in two ways that this package cares
about: as an XMP packet in a JPEG APP1 segment that references the C2PA
namespace, and as provenance text in PNG ``tEXt``/``iTXt`` chunks.  The
functions here decide whether a decoded payload is provenance-bearing.

Three checks are applied to XMP text:

1. Lowercase substring match against ``C2PA_TEXT_MARKERS``.
2. Exact-case match against the C2PA namespace and manifest/claim tags.
3. Case-insensitive regex over ``C2PA_PATTERN``.

The regex subsumes the first two; all three are kept so the result
matches the established detection behaviour exactly.
"""

from __future__ import annotations

import re

from constants import (
    C2PA_CLAIM_TAG,
    C2PA_MANIFEST_TAG,
    C2PA_NAMESPACE,
    C2PA_PATTERN,
    C2PA_TEXT_MARKERS,
    PNG_TEXT_C2PA_MARKERS,
)

_C2PA_REGEX = re.compile(C2PA_PATTERN, re.IGNORECASE)


def decode_payload(payload: bytes | bytearray | memoryview) -> str:
    """Decode a byte span as UTF-8, replacing invalid sequences."""
    return bytes(payload).decode("utf-8", errors="replace")


def has_c2pa_marker(text: str) -> bool:
    """Return True if the lowercase *text* contains a C2PA marker substring."""
    lowered = text.lower()
    return any(marker in lowered for marker in C2PA_TEXT_MARKERS)


def has_png_text_marker(text: str) -> bool:
    """Return True if a PNG text chunk payload names C2PA content."""
    lowered = text.lower()
    return any(marker in lowered for marker in PNG_TEXT_C2PA_MARKERS)


def is_c2pa_text(text: str) -> bool:
    """
    Check whether a decoded XMP payload is provenance-bearing.

    Args:
        text: Decoded payload text.

    Returns:
        True if any of the marker, namespace/tag, or pattern checks hits.
    """
    if has_c2pa_marker(text):
        return True

    if C2PA_NAMESPACE in text:
        return True
    if C2PA_MANIFEST_TAG in text or C2PA_CLAIM_TAG in text:
        return True

    return _C2PA_REGEX.search(text) is not None


def is_c2pa_payload(payload: bytes | bytearray | memoryview) -> bool:
    """Decode *payload* best-effort and classify it with ``is_c2pa_text``."""
    try:
        text = decode_payload(payload)
    except (TypeError, ValueError):
        return False
    return is_c2pa_text(text)
