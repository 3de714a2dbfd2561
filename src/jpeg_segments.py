"""JPEG marker-segment walking, C2PA detection, and segment surgery.

The walker starts after the SOI marker and yields one ``JpegSegment``
per marker it can frame.  Stray bytes between markers are skipped one
at a time.  A segment whose length field is invalid or points past the
end of the buffer is skipped by stepping over its marker only; a walk
that cannot read a length field at all simply ends.  Nothing here
raises on truncated input.

C2PA lives in two places before the scan data:

- APP1 segments holding an XMP packet that references C2PA.
- APP11 segments (JUMBF boxes), which are dropped without inspection.
"""

from __future__ import annotations

import io
import logging
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from c2pa import is_c2pa_payload
from constants import (
    JPEG_EOI,
    JPEG_SIGNATURE,
    MARKER_APP1,
    MARKER_APP11,
    MARKER_EOI,
    MARKER_PREFIX,
    MARKER_RST_FIRST,
    MARKER_RST_LAST,
    MARKER_SOS,
    MARKER_TEM,
    XMP_PREFIX,
)
from errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class SegmentKind(Enum):
    """How a JPEG marker is framed in the byte stream."""

    STANDALONE = "standalone"  # RSTn / TEM, no length field
    SEGMENT = "segment"  # length-prefixed
    SCAN = "scan"  # SOS header, entropy-coded data and everything after
    EOI = "eoi"


@dataclass(frozen=True)
class JpegSegment:
    """A marker unit located inside a JPEG buffer."""

    marker: int
    offset: int
    payload_start: int
    payload_length: int
    kind: SegmentKind

    @property
    def end(self) -> int:
        return self.payload_start + self.payload_length

    @property
    def is_app1(self) -> bool:
        return self.marker == MARKER_APP1

    @property
    def is_app11(self) -> bool:
        return self.marker == MARKER_APP11

    def payload(self, data: bytes) -> bytes:
        return data[self.payload_start:self.end]

    def raw(self, data: bytes) -> bytes:
        return data[self.offset:self.end]


def iter_segments(data: bytes) -> Iterator[JpegSegment]:
    """
    Walk the marker stream of a JPEG buffer.

    Args:
        data: JPEG bytes, starting with the SOI marker.

    Yields:
        Each framed marker in file order. Iteration ends after the SCAN
        or EOI unit, or when no further length field can be read.
    """
    pos = 2
    size = len(data)

    while pos < size - 1:
        if data[pos] != MARKER_PREFIX:
            pos += 1
            continue

        marker = data[pos + 1]

        if marker == MARKER_SOS:
            yield JpegSegment(marker, pos, pos + 2, size - pos - 2, SegmentKind.SCAN)
            return

        if marker == MARKER_EOI:
            yield JpegSegment(marker, pos, pos + 2, 0, SegmentKind.EOI)
            return

        if MARKER_RST_FIRST <= marker <= MARKER_RST_LAST or marker == MARKER_TEM:
            yield JpegSegment(marker, pos, pos + 2, 0, SegmentKind.STANDALONE)
            pos += 2
            continue

        if pos + 4 > size:
            logger.debug("JPEG walk stopped at offset %d: no room for a length field", pos)
            return

        (length,) = struct.unpack(">H", data[pos + 2:pos + 4])
        if length < 2 or pos + 2 + length > size:
            logger.debug(
                "Skipping marker 0x%02X at offset %d with bad length %d", marker, pos, length
            )
            pos += 2
            continue

        yield JpegSegment(marker, pos, pos + 4, length - 2, SegmentKind.SEGMENT)
        pos += 2 + length


def is_c2pa_segment(data: bytes, segment: JpegSegment) -> bool:
    """Return True if *segment* carries C2PA provenance data."""
    if segment.kind is not SegmentKind.SEGMENT:
        return False

    if segment.is_app11:
        return True

    if segment.is_app1:
        payload = segment.payload(data)
        if payload.startswith(XMP_PREFIX):
            return is_c2pa_payload(payload)

    return False


def has_c2pa_jpeg(data: bytes) -> bool:
    """
    Check if a JPEG buffer contains C2PA metadata.

    Only the segments before the start of scan are inspected.

    Args:
        data: JPEG bytes.

    Returns:
        True if an APP11 segment or a C2PA-bearing XMP packet is found.
    """
    for segment in iter_segments(data):
        if segment.kind is SegmentKind.SCAN:
            break
        if is_c2pa_segment(data, segment):
            return True
    return False


def remove_c2pa_jpeg(data: bytes) -> bytes:
    """
    Rebuild a JPEG buffer without its C2PA segments.

    Every other unit is copied verbatim and in order. The SOS marker and
    everything after it are copied unchanged. If the stream never reached
    a start of scan, an EOI marker is appended unless the output already
    ends with one.

    Args:
        data: JPEG bytes.

    Returns:
        A new JPEG byte string.

    Raises:
        UnsupportedFormatError: If *data* does not start with the SOI marker.
    """
    if len(data) < 2 or data[:2] != JPEG_SIGNATURE:
        raise UnsupportedFormatError("Not a valid JPEG file")

    output = io.BytesIO()
    output.write(JPEG_SIGNATURE)

    found_sos = False
    removed = 0

    for segment in iter_segments(data):
        if segment.kind is SegmentKind.SCAN:
            found_sos = True
        if is_c2pa_segment(data, segment):
            removed += 1
            continue
        output.write(segment.raw(data))

    cleaned = output.getvalue()
    if not found_sos and not cleaned.endswith(JPEG_EOI):
        cleaned += JPEG_EOI

    logger.debug("Dropped %d C2PA segment(s) from JPEG", removed)
    return cleaned
