"""Tests for constants module."""

import re

from constants import (
    C2PA_CLAIM_TAG,
    C2PA_MANIFEST_TAG,
    C2PA_NAMESPACE,
    C2PA_PATTERN,
    C2PA_TEXT_MARKERS,
    JPEG_EOI,
    JPEG_SIGNATURE,
    MARKER_APP1,
    MARKER_APP11,
    MARKER_EOI,
    MARKER_SOS,
    PNG_IEND_CRC,
    PNG_SIGNATURE,
    PNG_TEXT_C2PA_MARKERS,
    PNG_TEXT_CHUNK_TYPES,
    SUPPORTED_FORMATS,
    XMP_PREFIX,
)


class TestSupportedFormats:
    """Tests for SUPPORTED_FORMATS constant."""

    def test_contains_png_and_jpeg(self) -> None:
        assert SUPPORTED_FORMATS == {".png", ".jpg", ".jpeg"}

    def test_lowercase_only(self) -> None:
        for fmt in SUPPORTED_FORMATS:
            assert fmt == fmt.lower()


class TestSignatures:
    """Tests for image signature constants."""

    def test_jpeg_signature(self) -> None:
        assert JPEG_SIGNATURE == b"\xff\xd8"
        assert JPEG_EOI == b"\xff\xd9"

    def test_png_signature(self) -> None:
        assert PNG_SIGNATURE == b"\x89PNG\r\n\x1a\n"
        assert len(PNG_SIGNATURE) == 8


class TestJpegMarkers:
    """Tests for JPEG marker constants."""

    def test_marker_values(self) -> None:
        assert MARKER_APP1 == 0xE1
        assert MARKER_APP11 == 0xEB
        assert MARKER_SOS == 0xDA
        assert MARKER_EOI == 0xD9

    def test_xmp_prefix_is_bytes(self) -> None:
        assert isinstance(XMP_PREFIX, bytes)
        assert XMP_PREFIX == b"http://ns.adobe.com/xap/1.0/"


class TestC2PAVocabulary:
    """Tests for C2PA detection vocabulary."""

    def test_namespace_and_tags(self) -> None:
        assert C2PA_NAMESPACE == "http://c2pa.org/"
        assert C2PA_MANIFEST_TAG == "c2pa:manifest"
        assert C2PA_CLAIM_TAG == "c2pa:claim"

    def test_text_markers_are_lowercase(self) -> None:
        for marker in C2PA_TEXT_MARKERS + PNG_TEXT_C2PA_MARKERS:
            assert marker == marker.lower()

    def test_png_markers_exclude_contentcredentials(self) -> None:
        assert "contentcredentials" in C2PA_TEXT_MARKERS
        assert "contentcredentials" not in PNG_TEXT_C2PA_MARKERS

    def test_pattern_compiles(self) -> None:
        assert re.search(C2PA_PATTERN, "ContentCredentials", re.IGNORECASE)


class TestPNGConstants:
    """Tests for PNG chunk constants."""

    def test_text_chunk_types(self) -> None:
        assert PNG_TEXT_CHUNK_TYPES == (b"tEXt", b"iTXt")

    def test_iend_crc(self) -> None:
        import zlib

        assert zlib.crc32(b"IEND") & 0xFFFFFFFF == PNG_IEND_CRC
