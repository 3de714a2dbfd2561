"""Test configuration and fixtures."""

from __future__ import annotations

import io
import tempfile
from pathlib import Path
from typing import Generator

import piexif
import pytest
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from builders import C2PA_XMP, insert_after_soi, jpeg_segment, minimal_jpeg, minimal_png


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Synthetic JPEG without C2PA metadata."""
    return minimal_jpeg(with_c2pa=False)


@pytest.fixture
def c2pa_jpeg_bytes() -> bytes:
    """Synthetic JPEG carrying a C2PA XMP packet in APP1."""
    return minimal_jpeg(with_c2pa=True)


@pytest.fixture
def png_bytes() -> bytes:
    """Synthetic PNG without C2PA metadata."""
    return minimal_png(with_c2pa=False)


@pytest.fixture
def c2pa_png_bytes() -> bytes:
    """Synthetic PNG carrying a C2PA tEXt chunk."""
    return minimal_png(with_c2pa=True)


@pytest.fixture
def encoded_jpeg() -> bytes:
    """A real, decodable JPEG encoded by Pillow."""
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), color="blue").save(buf, "JPEG")
    return buf.getvalue()


@pytest.fixture
def encoded_jpeg_with_c2pa(encoded_jpeg: bytes) -> bytes:
    """A real JPEG with a C2PA XMP packet spliced in after SOI."""
    return insert_after_soi(encoded_jpeg, jpeg_segment(0xE1, C2PA_XMP))


@pytest.fixture
def encoded_jpeg_with_exif() -> bytes:
    """A real JPEG carrying EXIF written by piexif."""
    exif_dict = {
        "0th": {piexif.ImageIFD.ImageDescription: b"Content Credentials test shot"},
        "Exif": {},
        "1st": {},
        "GPS": {},
        "Interop": {},
    }
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), color="green").save(buf, "JPEG", exif=piexif.dump(exif_dict))
    return buf.getvalue()


@pytest.fixture
def encoded_png() -> bytes:
    """A real, decodable PNG encoded by Pillow."""
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), color="red").save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def encoded_png_with_c2pa() -> bytes:
    """A real PNG with C2PA text in a tEXt chunk."""
    info = PngInfo()
    info.add_text("Provenance", "c2pa manifest contentauthenticity")
    info.add_text("Author", "Test Author")
    buf = io.BytesIO()
    Image.new("RGBA", (32, 32), color=(255, 0, 0, 128)).save(buf, "PNG", pnginfo=info)
    return buf.getvalue()


@pytest.fixture
def sample_jpg(temp_dir: Path, encoded_jpeg: bytes) -> Path:
    """Write a clean JPEG to disk."""
    img_path = temp_dir / "sample.jpg"
    img_path.write_bytes(encoded_jpeg)
    return img_path


@pytest.fixture
def c2pa_jpg(temp_dir: Path, encoded_jpeg_with_c2pa: bytes) -> Path:
    """Write a JPEG carrying C2PA to disk."""
    img_path = temp_dir / "c2pa.jpg"
    img_path.write_bytes(encoded_jpeg_with_c2pa)
    return img_path


@pytest.fixture
def c2pa_png(temp_dir: Path, c2pa_png_bytes: bytes) -> Path:
    """Write the synthetic C2PA PNG to disk."""
    img_path = temp_dir / "c2pa.png"
    img_path.write_bytes(c2pa_png_bytes)
    return img_path
