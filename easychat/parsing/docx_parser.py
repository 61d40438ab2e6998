"""Word document parsing using python-docx."""

import io

from docx import Document
from docx.table import Table


class DocxParseError(Exception):
    """Raised when a .docx container cannot be decoded."""

    pass


def _table_lines(table: Table) -> list[str]:
    return ["\t".join(cell.text.strip() for cell in row.cells) for row in table.rows]


def parse_docx(file_content: bytes) -> list[str]:
    """Extract the raw text of a Word document.

    Paragraphs and table rows are emitted in document order, separated by
    blank lines. Table cells are tab separated.

    Args:
        file_content: Raw bytes of the .docx file.

    Returns:
        A single-fragment list holding the document text.

    Raises:
        DocxParseError: If the bytes are not a readable Word document.
    """
    try:
        document = Document(io.BytesIO(file_content))
    except Exception as e:
        raise DocxParseError(f"Invalid Word document: {e}") from e

    blocks: list[str] = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            blocks.extend(_table_lines(block))
        else:
            blocks.append(block.text)

    return ["\n\n".join(blocks)]
