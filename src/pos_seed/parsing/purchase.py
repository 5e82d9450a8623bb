"""PEMBELIAN (purchase report) parser.

The purchase export lists invoices one after another. Each invoice starts
with a header row that mixes ``Label : Value`` triples with the item table
head, e.g.::

    Nomor | : | BL2601000002 | Admin | : | Budi | ... | SALATIGA | No | Kode | Nama ...

followed by numbered item rows and a ``Keterangan / Sub Total / Diskon /
Total`` footer.

Examples:
    >>> from pos_seed.parsing.purchase import read_purchase_xls
    >>> doc = read_purchase_xls("PEMBELIAN.xls")
    >>> doc.entries[0].header.nomor
    'BL2601000002'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pos_seed.parsing.classify import classify_purchase_row
from pos_seed.parsing.cleaning_utils import (
    parse_dmy_date,
    text_or_none,
    to_float,
    to_int,
    to_text,
)
from pos_seed.parsing.grid import Grid, cell_at, load_grid, numeric_tail
from pos_seed.parsing.models import (
    PurchaseDocument,
    PurchaseEntry,
    PurchaseHeader,
    PurchaseItem,
    PurchaseSummary,
)
from pos_seed.parsing.reducer import parse_meta_row, reduce_rows

logger = logging.getLogger(__name__)

# Label -> header attribute
HEADER_LABELS = {
    "Nomor": "nomor",
    "Admin": "admin",
    "Tanggal": "tanggal",
    "Pemasok": "pemasok",
    "Jatuh Tempo": "jatuh_tempo",
}
DATE_FIELDS = {"tanggal", "jatuh_tempo"}

# Label -> summary attribute
SUMMARY_LABELS = {
    "Keterangan": "keterangan",
    "Sub Total": "sub_total",
    "Diskon": "diskon",
    "Total": "total",
}


def parse_purchase_header(row: List[str]) -> PurchaseHeader:
    """Extract invoice fields from a purchase header row.

    A label is only honoured when the next cell is exactly ``":"``; the
    value is the cell after that. The location is the free-text cell right
    before the first ``"No"`` table-head cell, when it is neither a colon nor
    a label.

    Args:
        row: Header row cells.

    Returns:
        PurchaseHeader with the fields that were found.
    """
    header = PurchaseHeader()

    for i, cell in enumerate(row):
        attr = HEADER_LABELS.get(cell)
        if attr is None or cell_at(row, i + 1) != ":":
            continue
        val = cell_at(row, i + 2)
        if attr in DATE_FIELDS:
            setattr(header, attr, parse_dmy_date(val))
        else:
            setattr(header, attr, text_or_none(val))

    if "No" in row:
        no_idx = row.index("No")
        if no_idx > 0:
            candidate = to_text(row[no_idx - 1])
            if candidate and candidate != ":" and candidate not in HEADER_LABELS:
                header.lokasi = candidate

    return header


def parse_purchase_item(row: List[str]) -> Optional[PurchaseItem]:
    """Parse ``No | Kode | Nama | Kuantitas | Sat | Harga Beli | Diskon | Jumlah``.

    Lone "." or ":" cells between the amount columns are layout fillers and
    are skipped before the amounts are read.

    Returns:
        PurchaseItem, or None when the line number does not parse or the row
        has neither code nor name.
    """
    no = to_int(cell_at(row, 0))
    if no is None:
        return None

    amounts = numeric_tail(row, 5)
    item = PurchaseItem(
        no=no,
        kode=to_text(cell_at(row, 1)),
        nama=to_text(cell_at(row, 2)),
        kuantitas=to_float(cell_at(row, 3)),
        sat=to_text(cell_at(row, 4)),
        harga_beli=to_float(cell_at(amounts, 0)),
        diskon=to_float(cell_at(amounts, 1)),
        jumlah=to_float(cell_at(amounts, 2)),
    )
    if not item.is_valid:
        return None
    return item


def parse_purchase_summary(row: List[str]) -> PurchaseSummary:
    """Extract the footer totals; an empty Keterangan becomes None."""
    summary = PurchaseSummary()
    for i, cell in enumerate(row):
        attr = SUMMARY_LABELS.get(cell)
        if attr is None or cell_at(row, i + 1) != ":":
            continue
        val = cell_at(row, i + 2)
        if attr == "keterangan":
            summary.keterangan = text_or_none(val)
        else:
            setattr(summary, attr, to_float(val))
    return summary


def _start_entry(row: List[str]) -> PurchaseEntry:
    return PurchaseEntry(header=parse_purchase_header(row))


def reduce_purchase_grid(grid: Grid) -> PurchaseDocument:
    """Turn a purchase report grid into a PurchaseDocument."""
    entries = reduce_rows(
        grid,
        classify_purchase_row,
        _start_entry,
        parse_purchase_item,
        parse_purchase_summary,
    )
    return PurchaseDocument(meta=parse_meta_row(grid), entries=entries)


def read_purchase_xls(path: str | Path) -> PurchaseDocument:
    """Load and parse a PEMBELIAN workbook."""
    doc = reduce_purchase_grid(load_grid(path))
    logger.info("Parsed %d purchase entries from %s", len(doc.entries), path)
    return doc
