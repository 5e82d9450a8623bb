"""PENJUALAN (sales report) parser.

Each receipt starts with a row whose first cell is the receipt number
(``SL2601000045``) and which also carries the item table head
(No, Kode, Nama, Kts, Sat, ...). Numbered item rows follow, closed by a
fixed-layout footer::

    Sub Total | <subtotal> | Diskon | <discount> | Total | <total>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pos_seed.parsing.classify import classify_sales_row
from pos_seed.parsing.cleaning_utils import to_float, to_int, to_text
from pos_seed.parsing.grid import Grid, cell_at, load_grid, numeric_tail
from pos_seed.parsing.models import SalesDocument, SalesEntry, SalesItem, SalesSummary
from pos_seed.parsing.reducer import parse_meta_row, reduce_rows

logger = logging.getLogger(__name__)

# Fixed footer positions
SUBTOTAL_COL = 1
DISCOUNT_COL = 3
TOTAL_COL = 5


def parse_sales_item(row: List[str]) -> Optional[SalesItem]:
    """Parse one sales line.

    Columns: No | Kode | Nama | Kts | Sat | Harga Pokok | Harga Jual |
    Diskon | Laba | Jumlah.

    Returns:
        SalesItem, or None when the line number does not parse or the row
        has neither code nor name.
    """
    no = to_int(cell_at(row, 0))
    if no is None:
        return None

    amounts = numeric_tail(row, 5)
    item = SalesItem(
        no=no,
        kode=to_text(cell_at(row, 1)),
        nama=to_text(cell_at(row, 2)),
        kts=to_float(cell_at(row, 3)),
        sat=to_text(cell_at(row, 4)),
        harga_pokok=to_float(cell_at(amounts, 0)),
        harga_jual=to_float(cell_at(amounts, 1)),
        diskon=to_float(cell_at(amounts, 2)),
        laba=to_float(cell_at(amounts, 3)),
        jumlah=to_float(cell_at(amounts, 4)),
    )
    if not item.is_valid:
        return None
    return item


def parse_sales_summary(row: List[str]) -> SalesSummary:
    return SalesSummary(
        sub_total=to_float(cell_at(row, SUBTOTAL_COL)),
        diskon=to_float(cell_at(row, DISCOUNT_COL)),
        total=to_float(cell_at(row, TOTAL_COL)),
    )


def _start_entry(row: List[str]) -> SalesEntry:
    return SalesEntry(nomor=to_text(cell_at(row, 0)))


def reduce_sales_grid(grid: Grid) -> SalesDocument:
    """Turn a sales report grid into a SalesDocument."""
    entries = reduce_rows(
        grid,
        classify_sales_row,
        _start_entry,
        parse_sales_item,
        parse_sales_summary,
    )
    return SalesDocument(meta=parse_meta_row(grid), entries=entries)


def read_sales_xls(path: str | Path) -> SalesDocument:
    """Load and parse a PENJUALAN workbook."""
    doc = reduce_sales_grid(load_grid(path))
    logger.info("Parsed %d sales entries from %s", len(doc.entries), path)
    return doc
