"""Shared constants for C2PA detection, JPEG/PNG parsing, and re-encoding.

All modules reference these constants rather than hard-coding values,
so adjusting the detection vocabulary or a marker requires updating
only this file.
"""

# Supported image formats
SUPPORTED_FORMATS = {".png", ".jpg", ".jpeg"}

# Image signatures
JPEG_SIGNATURE = b"\xff\xd8"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# JPEG marker types (the byte following 0xFF)
MARKER_PREFIX = 0xFF
MARKER_TEM = 0x01
MARKER_RST_FIRST = 0xD0
MARKER_RST_LAST = 0xD7
MARKER_EOI = 0xD9  # End of Image
MARKER_SOS = 0xDA  # Start of Scan
MARKER_APP1 = 0xE1  # EXIF / XMP
MARKER_APP11 = 0xEB  # JUMBF container used by C2PA

JPEG_EOI = b"\xff\xd9"

# APP1 payloads starting with this prefix carry an XMP packet
XMP_PREFIX = b"http://ns.adobe.com/xap/1.0/"

# C2PA namespace and XMP tags (matched case-sensitively)
C2PA_NAMESPACE = "http://c2pa.org/"
C2PA_MANIFEST_TAG = "c2pa:manifest"
C2PA_CLAIM_TAG = "c2pa:claim"

# Lowercase substrings that mark provenance text
C2PA_TEXT_MARKERS = (
    "c2pa",
    "contentauthenticity",
    "contentcredentials",
    "cai:",
)

# Narrower vocabulary applied to PNG tEXt/iTXt chunk payloads
PNG_TEXT_C2PA_MARKERS = (
    "c2pa",
    "contentauthenticity",
    "cai:",
)

# Case-insensitive pattern applied to XMP packets
C2PA_PATTERN = r"c2pa|contentauthenticity|contentcredentials|cai"

# PNG chunk types
PNG_TEXT_CHUNK_TYPES = (b"tEXt", b"iTXt")
PNG_IEND = b"IEND"
PNG_IEND_CRC = 0xAE426082

# Re-encode ("Smart Mode") settings
JPEG_REENCODE_QUALITY = 95
PNG_REENCODE_QUALITY = 100  # ignored by the PNG encoder, kept for the contract
PNG_COMPRESS_LEVEL = 6
