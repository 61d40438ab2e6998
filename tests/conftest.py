"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - chat_config: ChatConfig with a test API key
    - pdf_bytes / docx_bytes / xlsx_bytes: generated sample documents
    - png_bytes: small binary payload for image attachments
    - gemini_reply: builder for a successful generateContent body
"""

import io
from collections.abc import Callable

import pytest
from docx import Document
from openpyxl import Workbook

from easychat.chat.config import ChatConfig


def build_pdf(pages: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page."""
    count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(count))
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def chat_config() -> ChatConfig:
    """Config pointing at a fake endpoint with a test key."""
    return ChatConfig(
        api_key="test-key",
        base_url="https://gemini.test/v1beta",
        model_name="gemini-test",
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    """Two-page PDF with distinct text per page."""
    return build_pdf(["First page text", "Second page text"])


@pytest.fixture
def docx_bytes() -> bytes:
    """Word document with two paragraphs and a one-row table."""
    document = Document()
    document.add_paragraph("Quarterly report")
    document.add_paragraph("Revenue grew steadily.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Region"
    table.rows[0].cells[1].text = "North"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def xlsx_bytes() -> bytes:
    """Workbook with sheets Sheet1 and Sheet2, in that order."""
    workbook = Workbook()
    first = workbook.active
    first.title = "Sheet1"
    first.append(["name", "qty"])
    first.append(["apple", 3])
    second = workbook.create_sheet("Sheet2")
    second.append(["city", "note"])
    second.append(["Paris", "has, comma"])
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """PNG signature followed by arbitrary binary payload."""
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture
def gemini_reply() -> Callable[[str], dict]:
    """Build a successful generateContent response body."""

    def build(text: str) -> dict:
        return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}

    return build
