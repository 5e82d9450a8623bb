"""Row classification for multi-transaction POS report dumps.

Purchase (PEMBELIAN) and sales (PENJUALAN) reports interleave transaction
header rows, numbered item rows, summary footers and report noise in one
flat sheet. The predicates here decide which role a single row plays.
Precedence is header, then summary, then item; everything else is noise.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, List

_ITEM_NO_RE = re.compile(r"[0-9]+")
_SALES_NUMBER_RE = re.compile(r"SL[0-9]+", re.IGNORECASE)

PURCHASE_TABLE_HEAD = ("No", "Kode", "Nama")
SALES_TABLE_HEAD = ("No", "Kode", "Nama", "Kts", "Sat")


class RowRole(str, Enum):
    HEADER = "transaction-header"
    ITEM = "item"
    SUMMARY = "summary"
    NOISE = "noise"


RowClassifier = Callable[[List[str]], RowRole]


def _first(row: List[str]) -> str:
    return row[0] if row else ""


def is_item_row(row: List[str]) -> bool:
    """First cell is the row-declared line number (digits only)."""
    return bool(_ITEM_NO_RE.fullmatch(_first(row)))


def is_purchase_header_row(row: List[str]) -> bool:
    """Row carries ``Nomor``, a ``:`` cell and the No/Kode/Nama table head."""
    return "Nomor" in row and ":" in row and all(h in row for h in PURCHASE_TABLE_HEAD)


def is_purchase_summary_row(row: List[str]) -> bool:
    return "Keterangan" in row and "Total" in row


def is_sales_header_row(row: List[str]) -> bool:
    """First cell is a ``SL<digits>`` receipt number and the table head is present."""
    return bool(_SALES_NUMBER_RE.fullmatch(_first(row))) and all(
        h in row for h in SALES_TABLE_HEAD
    )


def is_sales_summary_row(row: List[str]) -> bool:
    return _first(row) == "Sub Total" and "Total" in row


def classify_purchase_row(row: List[str]) -> RowRole:
    if is_purchase_header_row(row):
        return RowRole.HEADER
    if is_purchase_summary_row(row):
        return RowRole.SUMMARY
    if is_item_row(row):
        return RowRole.ITEM
    return RowRole.NOISE


def classify_sales_row(row: List[str]) -> RowRole:
    if is_sales_header_row(row):
        return RowRole.HEADER
    if is_sales_summary_row(row):
        return RowRole.SUMMARY
    if is_item_row(row):
        return RowRole.ITEM
    return RowRole.NOISE
