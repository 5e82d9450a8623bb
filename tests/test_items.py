"""Tests for the item master import."""

from pathlib import Path

import pytest

from pos_seed.exceptions import MissingFieldError
from pos_seed.parsing.items import (
    ITEM_COLUMN_MAP,
    grid_to_item_seeds,
    map_columns,
    read_items_xls,
)
from tests.test_utils import write_workbook

HEADER = [
    "KodeItem", "NamaItem", "KodeJenis", "KodePemasok", "HargaBeli", "Satuan1",
    "Satuan2", "Kuantitas1", "Kuantitas2", "HargaJualEcer1", "HargaJualEcer2",
    "Stok", "Keterangan",
]


def test_column_map_covers_the_export() -> None:
    assert len(ITEM_COLUMN_MAP) == 19
    assert ITEM_COLUMN_MAP["KodeItem"] == "kode_item"
    assert ITEM_COLUMN_MAP["HargaJualKhusus2"] == "harga_jual_khusus2"


def test_map_columns_ignores_unknown_headers() -> None:
    mapping = map_columns(HEADER)
    assert mapping[0] == "kode_item"
    assert 12 not in mapping


def test_grid_to_item_seeds() -> None:
    grid = [
        HEADER,
        ["8991002101234", "Teh Botol", "MNM", "SUP1", "3.000", "PCS", "DUS",
         "1", "24", "3,500", "80,000", "12", "catatan"],
        ["A2", "Gula 1kg", "SMB", "SUP2", "", "KG", "", "1", "", "15000", "", "", ""],
    ]
    items = grid_to_item_seeds(grid)
    assert len(items) == 2

    teh, gula = items
    assert teh.kode_item == "8991002101234"
    assert teh.harga_beli == 3000
    assert teh.satuan2 == "DUS"
    assert teh.kuantitas2 == 24
    assert teh.harga_jual_ecer1 == 3500
    assert teh.harga_jual_ecer2 == 80000
    assert teh.stok == 12
    # columns absent from the sheet stay at their defaults
    assert teh.harga_pokok is None
    assert teh.upload == ""
    assert teh.tipe == ""

    assert gula.harga_beli is None
    assert gula.satuan2 is None
    assert gula.kuantitas2 is None


def test_rows_without_code_and_name_are_skipped() -> None:
    grid = [HEADER, ["", "", "X"], ["A1", "Teh"]]
    items = grid_to_item_seeds(grid)
    assert [i.kode_item for i in items] == ["A1"]


def test_missing_code_is_fatal_with_row_number() -> None:
    grid = [HEADER, ["A1", "Teh"], ["", "Gula"]]
    with pytest.raises(MissingFieldError) as exc:
        grid_to_item_seeds(grid)
    assert exc.value.row_number == 3
    assert exc.value.field == "KodeItem"
    assert "Row 3" in str(exc.value)


def test_missing_name_reports_the_code() -> None:
    grid = [HEADER, ["A1", "  "]]
    with pytest.raises(MissingFieldError) as exc:
        grid_to_item_seeds(grid)
    assert exc.value.row_number == 2
    assert exc.value.code == "A1"
    assert "KodeItem=A1" in str(exc.value)


def test_header_only_grid_is_empty() -> None:
    assert grid_to_item_seeds([HEADER]) == []
    assert grid_to_item_seeds([]) == []


def test_item_to_dict_keys() -> None:
    item = grid_to_item_seeds([HEADER, ["A1", "Teh", "MNM"]])[0]
    data = item.to_dict()
    assert data["kodeItem"] == "A1"
    assert data["kodeJenis"] == "MNM"
    assert data["satuan2"] is None
    assert "hargaJualEcer1" in data


def test_read_items_xls_keeps_long_codes(tmp_path: Path) -> None:
    path = write_workbook(
        tmp_path / "DATAITEMBARANG.xlsx",
        [
            ["KodeItem", "NamaItem", "Satuan1", "HargaJualEcer1"],
            ["8991002101234", "Teh Botol", "PCS", 3500],
        ],
    )
    items = read_items_xls(path)
    assert len(items) == 1
    assert items[0].kode_item == "8991002101234"
    assert items[0].harga_jual_ecer1 == 3500
