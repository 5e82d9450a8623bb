"""DATAITEMBARANG (item master) parser.

The item export is a plain table: row 0 holds column names, every other row
is one catalog item. Columns are matched against ITEM_COLUMN_MAP by exact
name; unknown columns are ignored.

Examples:
    >>> from pos_seed.parsing.items import read_items_xls
    >>> items = read_items_xls("DATAITEMBARANG.xls")
    >>> items[0].kode_item
    '8991002101234'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from pos_seed.exceptions import MissingFieldError
from pos_seed.parsing.cleaning_utils import text_or_none, to_float, to_text
from pos_seed.parsing.grid import Grid, cell_at, load_grid
from pos_seed.parsing.models import ItemSeed

logger = logging.getLogger(__name__)

# Spreadsheet column -> ItemSeed attribute
ITEM_COLUMN_MAP: Dict[str, str] = {
    "KodeItem": "kode_item",
    "NamaItem": "nama_item",
    "KodeJenis": "kode_jenis",
    "KodePemasok": "kode_pemasok",
    "HargaBeli": "harga_beli",
    "HargaPokok": "harga_pokok",
    "Satuan1": "satuan1",
    "Satuan2": "satuan2",
    "Kuantitas1": "kuantitas1",
    "Kuantitas2": "kuantitas2",
    "HargaJualEcer1": "harga_jual_ecer1",
    "HargaJualEcer2": "harga_jual_ecer2",
    "HargaJualGrosir1": "harga_jual_grosir1",
    "HargaJualGrosir2": "harga_jual_grosir2",
    "HargaJualKhusus1": "harga_jual_khusus1",
    "HargaJualKhusus2": "harga_jual_khusus2",
    "Stok": "stok",
    "Upload": "upload",
    "Tipe": "tipe",
}

NUMERIC_FIELDS = {
    "harga_beli",
    "harga_pokok",
    "kuantitas1",
    "kuantitas2",
    "harga_jual_ecer1",
    "harga_jual_ecer2",
    "harga_jual_grosir1",
    "harga_jual_grosir2",
    "harga_jual_khusus1",
    "harga_jual_khusus2",
    "stok",
}


def map_columns(header_row: List[str]) -> Dict[int, str]:
    """Resolve column positions to ItemSeed attributes.

    Args:
        header_row: Column names from row 0.

    Returns:
        Mapping of column index -> attribute for recognized columns only.
    """
    mapping: Dict[int, str] = {}
    for i, name in enumerate(header_row):
        attr = ITEM_COLUMN_MAP.get(to_text(name))
        if attr is not None:
            mapping[i] = attr
    unknown = [h for h in header_row if h and h not in ITEM_COLUMN_MAP]
    if unknown:
        logger.debug("Ignoring unrecognized item columns: %s", unknown)
    return mapping


def grid_to_item_seeds(grid: Grid) -> List[ItemSeed]:
    """Convert an item master grid into ItemSeed records.

    Rows with neither KodeItem nor NamaItem are skipped. A row with only one
    of the two is a fatal error.

    Args:
        grid: Rows with the column header in row 0.

    Returns:
        ItemSeed records in row order.

    Raises:
        MissingFieldError: If KodeItem or NamaItem is empty on a data row.
    """
    if len(grid) < 2:
        return []

    columns = map_columns(grid[0])
    items: List[ItemSeed] = []

    for r in range(1, len(grid)):
        row = grid[r]
        if not row:
            continue

        values: Dict[str, Any] = {}
        for c, attr in columns.items():
            cell = cell_at(row, c)
            values[attr] = to_float(cell) if attr in NUMERIC_FIELDS else to_text(cell)

        kode_item = values.get("kode_item", "")
        nama_item = values.get("nama_item", "")
        if not kode_item and not nama_item:
            continue
        if not kode_item:
            raise MissingFieldError(r + 1, "KodeItem")
        if not nama_item:
            raise MissingFieldError(r + 1, "NamaItem", code=kode_item)

        values["satuan2"] = text_or_none(values.get("satuan2"))
        items.append(ItemSeed(**values))

    return items


def read_items_xls(path: str | Path) -> List[ItemSeed]:
    """Load and parse an item master workbook."""
    items = grid_to_item_seeds(load_grid(path))
    logger.info("Parsed %d items from %s", len(items), path)
    return items
