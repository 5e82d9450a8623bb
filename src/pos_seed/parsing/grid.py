"""Cell grid loader for legacy POS workbooks.

Reads the first sheet of an export into a list of rows, each a list of text
cells. Cells are rendered the way the spreadsheet displays them, number
format included, so zero-padded item codes and separator conventions
survive untouched until the field extractors decide how to read them.

``.xlsx`` is read with openpyxl and ``.xls`` with xlrd (``formatting_info``)
so each cell's number format is available. Other formats go through
``pandas.read_excel`` and are rendered with the General format.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, List, Optional, Tuple

import numpy as np
import openpyxl
import pandas as pd
import xlrd

from pos_seed.exceptions import NoSheetError

logger = logging.getLogger(__name__)

Grid = List[List[str]]

OPENPYXL_SUFFIXES = frozenset({".xlsx", ".xlsm"})
XLRD_SUFFIXES = frozenset({".xls"})

# Colors, locales, quoted literals, padding and fill directives
_FORMAT_NOISE_RE = re.compile(r"\[[^\]]*\]|\"[^\"]*\"|_.|\\.|\*.")
# 0, 0000000000000, 0.00, #,##0, #,##0.00
_FIXED_RE = re.compile(r"(#,##)?(0+)(?:\.(0+))?")
_PERCENT_RE = re.compile(r"(0+)(?:\.(0+))?%")


# ------------------------- Display text -------------------------
def _general(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return format(float(value), ".15g")


def _fixed(value: float, int_digits: int, decimals: int, grouped: bool) -> str:
    q = Decimal(repr(float(value))).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
    )
    sign = "-" if q < 0 else ""
    whole, dot, frac = format(abs(q), ",f" if grouped else "f").partition(".")
    if not grouped:
        whole = whole.zfill(int_digits)
    return sign + whole + dot + frac


def format_number(value: Any, number_format: Optional[str] = None) -> str:
    """Render a number with an Excel number format.

    Supported: General, ``@`` (text), zero-padded integers (``0000000000000``),
    fixed decimals (``0.00``), thousands grouping (``#,##0.00``) and percents
    (``0%``, ``0.00%``). Only the positive section of a format is used; any
    other format falls back to General.

    Examples:
        >>> format_number(89686000123, "0000000000000")
        '0089686000123'
        >>> format_number(1234.5, "#,##0.00")
        '1,234.50'
        >>> format_number(0.1, "0%")
        '10%'
        >>> format_number(0.1 + 0.2)
        '0.3'
    """
    if isinstance(value, (int, np.integer)) and not number_format:
        return str(int(value))

    fmt = (number_format or "General").split(";")[0]
    fmt = _FORMAT_NOISE_RE.sub("", fmt).strip()
    if fmt.lower() in ("", "general", "@"):
        return _general(value)

    m = _PERCENT_RE.fullmatch(fmt)
    if m:
        return _fixed(float(value) * 100, len(m.group(1)), len(m.group(2) or ""), False) + "%"

    m = _FIXED_RE.fullmatch(fmt)
    if m:
        return _fixed(value, len(m.group(2)), len(m.group(3) or ""), m.group(1) is not None)

    return _general(value)


def cell_to_text(value: Any, number_format: Optional[str] = None) -> str:
    """Render one cell the way the spreadsheet would display it.

    - Blank / NaN / NaT -> ``""``
    - Numbers -> :func:`format_number` with the cell's number format
      (General drops a trailing ``.0``: ``12.0`` -> ``"12"``)
    - Dates -> ``dd/mm/yyyy``
    - Anything else -> ``str(value)``, trimmed

    Args:
        value: Raw cell value.
        number_format: Excel number format of the cell, if known.

    Returns:
        Display text.
    """
    if value is None or value is pd.NaT:
        return ""
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value)).upper()
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return ""
        if not math.isfinite(value):
            return str(float(value))
        return format_number(value, number_format)
    if isinstance(value, (int, np.integer)):
        return format_number(value, number_format)
    if isinstance(value, (datetime, date, pd.Timestamp)):
        return value.strftime("%d/%m/%Y")
    return str(value).strip()


def is_blank_row(row: List[str]) -> bool:
    """Return True when every cell of the row is empty text."""
    return all(c == "" for c in row)


def cell_at(row: List[str], i: int) -> str:
    """Cell ``i`` of the row, or ``""`` past the end of a short row."""
    return row[i] if 0 <= i < len(row) else ""


# ------------------------- Sheet readers -------------------------
def _read_openpyxl(path: Path) -> Tuple[str, Grid]:
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        if not wb.worksheets:
            raise NoSheetError(f"Workbook has no sheets: {path}")
        ws = wb.worksheets[0]
        rows = [
            [cell_to_text(c.value, getattr(c, "number_format", None)) for c in row]
            for row in ws.iter_rows()
        ]
        return ws.title, rows
    finally:
        wb.close()


def _xlrd_cell_text(book: xlrd.book.Book, cell: xlrd.sheet.Cell) -> str:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return ""
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return cell_to_text(bool(cell.value))
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, "")
    if cell.ctype == xlrd.XL_CELL_DATE:
        try:
            return cell_to_text(xlrd.xldate_as_datetime(cell.value, book.datemode))
        except xlrd.xldate.XLDateError:
            logger.debug("Unreadable date serial %r, rendered as a number", cell.value)
    if cell.ctype in (xlrd.XL_CELL_NUMBER, xlrd.XL_CELL_DATE):
        xf = book.xf_list[cell.xf_index]
        fmt = book.format_map.get(xf.format_key)
        return cell_to_text(cell.value, fmt.format_str if fmt is not None else None)
    return cell_to_text(cell.value)


def _read_xlrd(path: Path) -> Tuple[str, Grid]:
    with xlrd.open_workbook(str(path), formatting_info=True) as book:
        if book.nsheets == 0:
            raise NoSheetError(f"Workbook has no sheets: {path}")
        sh = book.sheet_by_index(0)
        rows = [
            [_xlrd_cell_text(book, sh.cell(r, c)) for c in range(sh.ncols)]
            for r in range(sh.nrows)
        ]
        return sh.name, rows


def _read_pandas(path: Path) -> Tuple[str, Grid]:
    with pd.ExcelFile(path) as xls:
        if not xls.sheet_names:
            raise NoSheetError(f"Workbook has no sheets: {path}")
        sheet = xls.sheet_names[0]
        df = pd.read_excel(xls, sheet_name=sheet, header=None, dtype=object)
    return sheet, [[cell_to_text(v) for v in raw] for raw in df.itertuples(index=False, name=None)]


def load_grid(path: str | Path) -> Grid:
    """Load the first sheet of a workbook as a grid of display-text cells.

    Fully blank rows are dropped, so row 0 of the result is the first row
    that carries any content.

    Args:
        path: Path to the ``.xls``, ``.xlsx`` or other pandas-readable file.

    Returns:
        List of rows, each a list of text cells.

    Raises:
        NoSheetError: If the workbook contains no sheets.
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Workbook not found: {path}")

    suffix = path.suffix.lower()
    if suffix in OPENPYXL_SUFFIXES:
        sheet, rows = _read_openpyxl(path)
    elif suffix in XLRD_SUFFIXES:
        sheet, rows = _read_xlrd(path)
    else:
        sheet, rows = _read_pandas(path)

    grid: Grid = [row for row in rows if not is_blank_row(row)]
    logger.debug("Loaded %d non-blank rows from %s (sheet %r)", len(grid), path, sheet)
    return grid


# Lone separator cells some exports leave between numeric columns
FILLER_CELLS = frozenset({".", ":"})


def numeric_tail(row: List[str], start: int) -> List[str]:
    """Cells from ``start`` on, with separator-only filler cells removed."""
    return [c for c in row[start:] if c not in FILLER_CELLS]
