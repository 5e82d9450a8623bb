"""Tests for the PENJUALAN (sales report) parser."""

from pathlib import Path

from pos_seed.parsing.sales import (
    parse_sales_item,
    parse_sales_summary,
    read_sales_xls,
    reduce_sales_grid,
)
from tests.test_utils import (
    META_ROW,
    SALES_HEADER,
    SALES_ITEM,
    SALES_SUMMARY,
    sales_header,
    write_workbook,
)


def test_sales_item_columns() -> None:
    item = parse_sales_item(SALES_ITEM)
    assert item is not None
    assert item.no == 1
    assert item.kode == "SKU1"
    assert item.kts == 2
    assert item.sat == "pcs"
    assert item.harga_pokok == 3000
    assert item.harga_jual == 3500
    assert item.diskon == 0
    assert item.laba == 1000
    assert item.jumlah == 7000


def test_sales_item_without_code_and_name() -> None:
    assert parse_sales_item(["5", "", "", "1", "PCS"]) is None


def test_sales_summary_is_positional() -> None:
    summary = parse_sales_summary(SALES_SUMMARY)
    assert summary.sub_total == 7000
    assert summary.diskon == 0
    assert summary.total == 7000

    short = parse_sales_summary(["Sub Total", "7,000", "Diskon"])
    assert short.sub_total == 7000
    assert short.diskon is None
    assert short.total is None


def test_reduce_sales_grid() -> None:
    grid = [
        META_ROW,
        SALES_ITEM,  # before any receipt
        SALES_HEADER,
        SALES_ITEM,
        SALES_SUMMARY,
        ["Kasir : Budi"],
        sales_header("SL2601000046"),
        ["1", "SKU2", "Kopi", "1", "PCS", "2,000", "2,500", "", "500", "2,500"],
        ["2", "SKU1", "Teh Botol", "3", "PCS", "3,000", "3,500", "", "1,500", "10,500"],
    ]
    doc = reduce_sales_grid(grid)

    assert [e.nomor for e in doc.entries] == ["SL2601000045", "SL2601000046"]
    first, second = doc.entries
    assert len(first.items) == 1
    assert first.summary is not None
    assert first.summary.total == 7000
    assert [i.kode for i in second.items] == ["SKU2", "SKU1"]
    assert second.items[1].jumlah == 10500
    assert second.summary is None


def test_sales_to_dict() -> None:
    doc = reduce_sales_grid([META_ROW, SALES_HEADER, SALES_ITEM, SALES_SUMMARY])
    data = doc.to_dict()
    assert data["entries"][0]["nomor"] == "SL2601000045"
    assert data["entries"][0]["items"][0]["hargaJual"] == 3500
    assert data["entries"][0]["summary"]["subTotal"] == 7000


def test_read_sales_xls(tmp_path: Path) -> None:
    path = write_workbook(
        tmp_path / "PENJUALAN.xlsx",
        [["HaSmart", "PENJUALAN"], SALES_HEADER, SALES_ITEM, SALES_SUMMARY],
    )
    doc = read_sales_xls(path)
    assert len(doc.entries) == 1
    assert doc.entries[0].items[0].harga_jual == 3500
    assert doc.meta is not None
    assert doc.meta.report == "PENJUALAN"
