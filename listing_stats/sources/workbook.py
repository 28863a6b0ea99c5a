"""Read listing rows from an Excel worksheet.

Modern workbooks (.xlsx / .xlsm) are read with openpyxl, legacy .xls
exports with xlrd.
"""

from __future__ import annotations

import logging
import math
import re
import zipfile
from pathlib import Path
from typing import Any, Iterable, Iterator, Sequence

import xlrd
from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from listing_stats.config import DEFAULT_SHEET_NAME, ColumnLayout
from listing_stats.exceptions import WorkbookReadError, WorksheetNotFoundError
from listing_stats.models.listing import MISSING_STATUS, ListingRecord

logger = logging.getLogger(__name__)

LEGACY_SUFFIXES = frozenset({".xls"})

# xlrd cell types that carry no usable value
XLS_EMPTY_TYPES = frozenset({xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR})

# Accepted price spellings, tried in order. A single separator group is
# read as a decimal part: "1.500" and "1,500" are both 1.5.
PLAIN_PRICE = re.compile(r"[+-]?\d+(\.\d+)?")  # 320000.50
COMMA_DECIMAL_PRICE = re.compile(r"[+-]?\d+,\d+")  # 1800,50
DOT_GROUPED_PRICE = re.compile(r"[+-]?\d{1,3}(\.\d{3})+(,\d+)?")  # 1.500.000 / 1.234,56
COMMA_GROUPED_PRICE = re.compile(r"[+-]?\d{1,3}(,\d{3})+(\.\d+)?")  # 1,500,000 / 1,234.56


def open_worksheet_rows(path: str | Path, sheet_name: str = DEFAULT_SHEET_NAME) -> Iterator[tuple]:
    """Yield the raw cell values of every row in a worksheet.

    Parameters
    ----------
    path : str | Path
        Workbook file (.xlsx / .xlsm, or legacy .xls).
    sheet_name : str
        Worksheet to read.

    Yields
    ------
    tuple
        Cell values of one row, header included. Empty cells are None.

    Raises
    ------
    WorkbookReadError
        If the file is missing or is not a readable workbook.
    WorksheetNotFoundError
        If the workbook has no worksheet named ``sheet_name``.
    """
    path = Path(path)
    if path.suffix.lower() in LEGACY_SUFFIXES:
        yield from _xls_rows(path, sheet_name)
    else:
        yield from _xlsx_rows(path, sheet_name)


def _xlsx_rows(path: Path, sheet_name: str) -> Iterator[tuple]:
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise WorkbookReadError(f"Cannot open workbook {path}: {exc}") from exc

    try:
        # sheetnames also lists chartsheets, which hold no cells
        worksheets = {ws.title: ws for ws in wb.worksheets}
        if sheet_name not in worksheets:
            raise _sheet_not_found(path, sheet_name, list(worksheets))
        logger.debug("Reading worksheet %r from %s", sheet_name, path)
        yield from worksheets[sheet_name].iter_rows(values_only=True)
    finally:
        wb.close()


def _xls_rows(path: Path, sheet_name: str) -> Iterator[tuple]:
    try:
        book = xlrd.open_workbook(str(path), on_demand=True)
    except (OSError, xlrd.XLRDError) as exc:
        raise WorkbookReadError(f"Cannot open workbook {path}: {exc}") from exc

    try:
        if sheet_name not in book.sheet_names():
            raise _sheet_not_found(path, sheet_name, book.sheet_names())
        logger.debug("Reading legacy worksheet %r from %s", sheet_name, path)
        sheet = book.sheet_by_name(sheet_name)
        for index in range(sheet.nrows):
            yield tuple(_xls_value(cell) for cell in sheet.row(index))
    finally:
        book.release_resources()


def _xls_value(cell: xlrd.sheet.Cell) -> Any:
    if cell.ctype in XLS_EMPTY_TYPES:
        return None
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    return cell.value


def _sheet_not_found(path: Path, sheet_name: str, available: list[str]) -> WorksheetNotFoundError:
    names = ", ".join(available) or "none"
    return WorksheetNotFoundError(
        f"Worksheet {sheet_name!r} not found in {path} (available: {names})"
    )


def read_listings(
    path: str | Path,
    sheet_name: str = DEFAULT_SHEET_NAME,
    layout: ColumnLayout | None = None,
    header_rows: int = 1,
) -> Iterator[ListingRecord]:
    """Yield decoded listings from a worksheet, skipping the header.

    Fully blank rows are skipped.
    """
    layout = layout or ColumnLayout()
    decoded = 0
    blank = 0

    for index, row in enumerate(open_worksheet_rows(path, sheet_name)):
        if index < header_rows:
            continue
        if all(cell is None for cell in row):
            blank += 1
            continue
        decoded += 1
        yield decode_row(row, layout)

    logger.info("Decoded %d rows from %r (%d blank rows skipped)", decoded, sheet_name, blank)


def decode_row(row: Sequence[Any], layout: ColumnLayout | None = None) -> ListingRecord:
    """Normalize one raw row into a ListingRecord.

    Missing or unparsable cells fall back to the record defaults.
    """
    layout = layout or ColumnLayout()
    record = ListingRecord(
        listing_id=_to_id(_cell(row, layout.id_column)),
        sale_price=_to_price(_cell(row, layout.sale_price_column)),
        rent_price=_to_price(_cell(row, layout.rent_price_column)),
        status=_to_status(_cell(row, layout.status_column)),
    )
    if record.status == MISSING_STATUS:
        logger.debug("Listing %d has no status", record.listing_id)
    return record


def encode_row(
    record: ListingRecord,
    layout: ColumnLayout | None = None,
    filler: dict[int, Any] | None = None,
) -> list[Any]:
    """Lay out a record as a worksheet row.

    ``filler`` maps extra column indices to values (title, city, ...).
    """
    layout = layout or ColumnLayout()
    width = max([layout.width] + [i + 1 for i in (filler or {})])
    row: list[Any] = [None] * width
    for index, value in (filler or {}).items():
        row[index] = value
    row[layout.id_column] = record.listing_id
    row[layout.sale_price_column] = record.sale_price or None
    row[layout.rent_price_column] = record.rent_price or None
    row[layout.status_column] = None if record.status == MISSING_STATUS else record.status
    return row


def write_workbook(
    path: str | Path,
    rows: Iterable[Sequence[Any]],
    sheet_name: str = DEFAULT_SHEET_NAME,
    header: Sequence[str] | None = None,
) -> Path:
    """Write rows to a single-sheet workbook and return its path."""
    path = Path(path)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    if header:
        ws.append(list(header))
    count = 0
    for row in rows:
        ws.append(list(row))
        count += 1
    wb.save(path)
    logger.info("Wrote %d rows to %s [%s]", count, path, sheet_name)
    return path


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _to_id(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = int(float(text))
            except (ValueError, OverflowError):
                return 0
    else:
        return 0
    return number if number >= 0 else 0


def _to_price(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0

    text = re.sub(r"\s", "", value.strip().removeprefix("R$"))
    if not text:
        return 0.0
    if PLAIN_PRICE.fullmatch(text):
        return float(text)
    if COMMA_DECIMAL_PRICE.fullmatch(text):
        return float(text.replace(",", "."))
    if DOT_GROUPED_PRICE.fullmatch(text):
        return float(text.replace(".", "").replace(",", "."))
    if COMMA_GROUPED_PRICE.fullmatch(text):
        return float(text.replace(",", ""))

    logger.debug("Unparsable price %r read as 0", value)
    return 0.0


def _to_status(value: Any) -> str:
    if value is None:
        return MISSING_STATUS
    if isinstance(value, str):
        return value
    return str(value)
