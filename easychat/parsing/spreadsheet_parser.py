"""Spreadsheet parsing for modern (.xlsx, openpyxl) and legacy (.xls, xlrd) workbooks.

Each sheet becomes a CSV block preceded by a header line naming the sheet.
"""

import csv
import io
import logging
from collections.abc import Iterable, Sequence

import xlrd
from openpyxl import load_workbook
from xlrd.sheet import Cell

logger = logging.getLogger(__name__)


class SpreadsheetParseError(Exception):
    """Raised when a workbook cannot be decoded."""

    pass


def _cell_to_str(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rows_to_csv(rows: Iterable[Sequence[object]]) -> str:
    """Render rows as comma-separated text, one line per row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        writer.writerow([_cell_to_str(v) for v in row])
    return buffer.getvalue().removesuffix("\n")


def _sheet_block(name: str, csv_text: str) -> str:
    return f"--- Sheet: {name} ---\n{csv_text}\n"


def parse_xlsx(file_content: bytes) -> list[str]:
    """Extract every sheet of an .xlsx workbook in workbook order.

    Raises:
        SpreadsheetParseError: If the bytes are not a readable workbook.
    """
    try:
        workbook = load_workbook(io.BytesIO(file_content), read_only=True, data_only=True)
    except Exception as e:
        raise SpreadsheetParseError(f"Invalid workbook: {e}") from e

    try:
        blocks: list[str] = []
        for sheet_name in workbook.sheetnames:
            sheet = workbook[sheet_name]
            if not hasattr(sheet, "iter_rows"):
                # Chartsheets carry no cells
                logger.debug(f"Skipping cells of chart sheet: {sheet_name}")
                blocks.append(_sheet_block(sheet_name, ""))
                continue
            blocks.append(_sheet_block(sheet_name, rows_to_csv(sheet.iter_rows(values_only=True))))
        return blocks
    finally:
        workbook.close()


def _xls_value(cell: Cell, datemode: int) -> object:
    """Turn an xlrd cell into the value its workbook displays."""
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, "")
    return cell.value


def parse_xls(file_content: bytes) -> list[str]:
    """Extract every sheet of a legacy .xls workbook in workbook order.

    Raises:
        SpreadsheetParseError: If the bytes are not a readable workbook.
    """
    try:
        book = xlrd.open_workbook(file_contents=file_content)
    except Exception as e:
        raise SpreadsheetParseError(f"Invalid workbook: {e}") from e

    blocks: list[str] = []
    for sheet in book.sheets():
        rows = (
            [_xls_value(cell, book.datemode) for cell in sheet.row(r)] for r in range(sheet.nrows)
        )
        blocks.append(_sheet_block(sheet.name, rows_to_csv(rows)))
    return blocks
