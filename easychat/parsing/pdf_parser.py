"""PDF parsing module using pypdf.

Extracts the text of every page, in page order.
"""

import io
import logging

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _page_text(page: PageObject) -> str:
    """Collect the text runs of one page joined by single spaces."""
    runs: list[str] = []

    def visitor(text, cm, tm, font_dict, font_size) -> None:
        if text and text.strip():
            runs.append(text.strip())

    page.extract_text(visitor_text=visitor)
    return " ".join(runs)


def parse_pdf(file_content: bytes) -> list[str]:
    """Parse a PDF file and extract its text, one fragment per page.

    Each fragment is the page text followed by a newline.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Page fragments in page order.

    Raises:
        PDFParseError: If the file is corrupt or any page fails to extract.
    """
    try:
        reader = PdfReader(io.BytesIO(file_content))
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    fragments: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            fragments.append(_page_text(page) + "\n")
        except Exception as e:
            raise PDFParseError(f"Failed to extract text from page {i + 1}: {e}") from e

    if not any(f.strip() for f in fragments):
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return fragments
