"""Tests for C2PA classifier module."""

from c2pa import (
    decode_payload,
    has_c2pa_marker,
    has_png_text_marker,
    is_c2pa_payload,
    is_c2pa_text,
)


class TestDecodePayload:
    """Tests for decode_payload function."""

    def test_decodes_utf8(self) -> None:
        assert decode_payload("café".encode("utf-8")) == "café"

    def test_replaces_invalid_bytes(self) -> None:
        assert decode_payload(b"ab\xffcd") == "ab\ufffdcd"

    def test_accepts_memoryview(self) -> None:
        assert decode_payload(memoryview(b"c2pa")) == "c2pa"


class TestHasC2PAMarker:
    """Tests for has_c2pa_marker function."""

    def test_detects_c2pa_any_case(self) -> None:
        assert has_c2pa_marker("Signed with C2PA") is True

    def test_detects_contentcredentials(self) -> None:
        assert has_c2pa_marker("ContentCredentials") is True

    def test_detects_cai_prefix(self) -> None:
        assert has_c2pa_marker("<CAI:info/>") is True

    def test_bare_cai_is_not_a_marker(self) -> None:
        assert has_c2pa_marker("Caiman") is False

    def test_plain_text(self) -> None:
        assert has_c2pa_marker("A photo of a harbour") is False


class TestHasPNGTextMarker:
    """Tests for has_png_text_marker function."""

    def test_detects_contentauthenticity(self) -> None:
        assert has_png_text_marker("contentAuthenticity") is True

    def test_ignores_contentcredentials(self) -> None:
        assert has_png_text_marker("ContentCredentials") is False


class TestIsC2PAText:
    """Tests for is_c2pa_text function."""

    def test_detects_namespace(self) -> None:
        assert is_c2pa_text("xmlns:c2pa='http://c2pa.org/'") is True

    def test_detects_manifest_tag(self) -> None:
        assert is_c2pa_text("<c2pa:manifest>") is True

    def test_detects_claim_tag(self) -> None:
        assert is_c2pa_text("<c2pa:claim/>") is True

    def test_pattern_matches_bare_cai(self) -> None:
        assert is_c2pa_text("Caiman at the river") is True

    def test_pattern_is_case_insensitive(self) -> None:
        assert is_c2pa_text("CONTENTAUTHENTICITY") is True

    def test_plain_xmp(self) -> None:
        assert is_c2pa_text("<x:xmpmeta><dc:title>Harbour</dc:title></x:xmpmeta>") is False

    def test_empty(self) -> None:
        assert is_c2pa_text("") is False


class TestIsC2PAPayload:
    """Tests for is_c2pa_payload function."""

    def test_detects_in_bytes(self) -> None:
        assert is_c2pa_payload(b"http://ns.adobe.com/xap/1.0/ c2pa") is True

    def test_invalid_utf8_does_not_raise(self) -> None:
        assert is_c2pa_payload(b"\xff\xfe\xfd") is False

    def test_invalid_utf8_around_marker(self) -> None:
        assert is_c2pa_payload(b"\xff\xfec2pa\xfd") is True
