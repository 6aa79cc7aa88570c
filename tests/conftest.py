import io
from pathlib import Path

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """Generate a small solid-colour JPEG."""
    buf = io.BytesIO()
    Image.new("RGB", (32, 24), color=(200, 30, 30)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """Generate a small RGBA PNG."""
    buf = io.BytesIO()
    Image.new("RGBA", (16, 16), color=(0, 0, 255, 128)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def jpeg_path(tmp_path: Path, jpeg_bytes: bytes) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(jpeg_bytes)
    return path


@pytest.fixture()
def pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "report.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path
