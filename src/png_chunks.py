"""PNG chunk walking, C2PA detection, and chunk surgery.

Detection is deliberately coarse: the whole file is decoded as text
and searched for C2PA markers, wherever they sit.  Removal is precise:
only ``tEXt``/``iTXt`` chunks whose text names C2PA are dropped, every
other chunk is copied byte for byte with its original CRC.  Because
of that asymmetry removal verifies its own output and raises
``RemovalFailedError`` when provenance text survives outside the chunks
it inspects (for example inside a ``caBX`` or ``zTXt`` chunk).
"""

from __future__ import annotations

import io
import logging
import struct
from dataclasses import dataclass
from typing import Iterator

from c2pa import decode_payload, has_c2pa_marker, has_png_text_marker
from constants import PNG_IEND, PNG_IEND_CRC, PNG_SIGNATURE, PNG_TEXT_CHUNK_TYPES
from errors import RemovalFailedError

logger = logging.getLogger(__name__)

# length + type + crc
_CHUNK_OVERHEAD = 12


@dataclass(frozen=True)
class PngChunk:
    """A single chunk, viewing its data in the source buffer."""

    type: bytes
    length: int
    data: memoryview
    crc: int

    @property
    def is_text(self) -> bool:
        return self.type in PNG_TEXT_CHUNK_TYPES

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                struct.pack(">I", self.length),
                self.type,
                bytes(self.data),
                struct.pack(">I", self.crc),
            )
        )

    def __repr__(self) -> str:
        name = self.type.decode("ascii", errors="replace")
        return f"<PngChunk {name} len={self.length} crc=0x{self.crc:08X}>"


def iter_chunks(data: bytes) -> Iterator[PngChunk]:
    """
    Walk the chunks of a PNG buffer.

    Args:
        data: PNG bytes, starting with the 8-byte signature.

    Yields:
        Each complete chunk in file order, up to and including IEND.
        A trailing partial chunk ends the walk silently.
    """
    view = memoryview(data)
    pos = len(PNG_SIGNATURE)
    size = len(data)

    while pos + _CHUNK_OVERHEAD <= size:
        (length,) = struct.unpack(">I", view[pos:pos + 4])
        chunk_type = bytes(view[pos + 4:pos + 8])
        data_start = pos + 8

        if data_start + length + 4 > size:
            logger.debug("PNG walk stopped at offset %d: chunk runs past end of file", pos)
            return

        (crc,) = struct.unpack(">I", view[data_start + length:data_start + length + 4])
        yield PngChunk(chunk_type, length, view[data_start:data_start + length], crc)

        pos = data_start + length + 4
        if chunk_type == PNG_IEND:
            return


def extract_png_chunks(data: bytes) -> list[PngChunk]:
    """Return every chunk ``iter_chunks`` yields, as a list."""
    return list(iter_chunks(data))


def is_c2pa_chunk(chunk: PngChunk) -> bool:
    """Return True if *chunk* is a text chunk naming C2PA content."""
    if not chunk.is_text:
        return False
    return has_png_text_marker(decode_payload(chunk.data))


def has_c2pa_png(data: bytes) -> bool:
    """
    Check if a PNG buffer contains C2PA metadata.

    Args:
        data: PNG bytes.

    Returns:
        True if C2PA marker text appears anywhere in the file.
    """
    return has_c2pa_marker(decode_payload(data))


def remove_c2pa_png(data: bytes) -> bytes:
    """
    Rebuild a PNG buffer without its C2PA text chunks.

    Args:
        data: PNG bytes.

    Returns:
        The rebuilt PNG, or *data* itself when no chunk was removed.

    Raises:
        RemovalFailedError: If no chunk can be parsed, or if the rebuilt
            file still contains C2PA markers.
    """
    chunks = extract_png_chunks(data)
    if not chunks:
        raise RemovalFailedError("Failed to parse PNG chunks")

    output = io.BytesIO()
    output.write(PNG_SIGNATURE)

    removed = 0
    for chunk in chunks:
        if is_c2pa_chunk(chunk):
            removed += 1
            continue
        output.write(chunk.to_bytes())

    if not removed:
        return data

    if chunks[-1].type != PNG_IEND:
        output.write(struct.pack(">I", 0) + PNG_IEND + struct.pack(">I", PNG_IEND_CRC))

    logger.debug("Dropped %d C2PA text chunk(s) from PNG", removed)

    cleaned = output.getvalue()
    if has_c2pa_png(cleaned):
        raise RemovalFailedError("PNG fallback removal failed verification check")
    return cleaned
