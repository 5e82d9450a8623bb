"""Unit tests for row role classification."""

from pos_seed.parsing.classify import (
    RowRole,
    classify_purchase_row,
    classify_sales_row,
    is_item_row,
)
from tests.test_utils import (
    PURCHASE_HEADER,
    PURCHASE_ITEM,
    PURCHASE_SUMMARY,
    SALES_HEADER,
    SALES_ITEM,
    SALES_SUMMARY,
)


def test_item_row_needs_digits_only_first_cell() -> None:
    assert is_item_row(["12", "A"])
    assert not is_item_row(["1.0", "A"])
    assert not is_item_row(["", "A"])
    assert not is_item_row(["No", "Kode"])
    assert not is_item_row([])


def test_purchase_roles() -> None:
    assert classify_purchase_row(PURCHASE_HEADER) is RowRole.HEADER
    assert classify_purchase_row(PURCHASE_ITEM) is RowRole.ITEM
    assert classify_purchase_row(PURCHASE_SUMMARY) is RowRole.SUMMARY
    assert classify_purchase_row(["Laporan Pembelian", "", ""]) is RowRole.NOISE


def test_purchase_header_needs_every_token() -> None:
    """Nomor, a colon cell and the No/Kode/Nama table head are all required."""
    no_colon = [c for c in PURCHASE_HEADER if c != ":"]
    assert classify_purchase_row(no_colon) is RowRole.NOISE
    no_kode = [c for c in PURCHASE_HEADER if c != "Kode"]
    assert classify_purchase_row(no_kode) is RowRole.NOISE
    # tokens may sit anywhere in the row
    shuffled = ["Nama", "Kode", "x", "No", ":", "Nomor"]
    assert classify_purchase_row(shuffled) is RowRole.HEADER


def test_purchase_summary_takes_precedence_over_item() -> None:
    row = ["1", "Keterangan", "Total"]
    assert classify_purchase_row(row) is RowRole.SUMMARY


def test_purchase_summary_needs_exact_cells() -> None:
    assert classify_purchase_row(["Keterangan:", "Total"]) is RowRole.NOISE
    assert classify_purchase_row(["Keterangan", "Grand Total"]) is RowRole.NOISE


def test_sales_roles() -> None:
    assert classify_sales_row(SALES_HEADER) is RowRole.HEADER
    assert classify_sales_row(SALES_ITEM) is RowRole.ITEM
    assert classify_sales_row(SALES_SUMMARY) is RowRole.SUMMARY


def test_sales_header_number_is_case_insensitive() -> None:
    assert classify_sales_row(["sl123"] + SALES_HEADER[1:]) is RowRole.HEADER
    assert classify_sales_row(["SL"] + SALES_HEADER[1:]) is RowRole.NOISE
    assert classify_sales_row(["BL123"] + SALES_HEADER[1:]) is RowRole.NOISE


def test_sales_header_needs_table_head() -> None:
    row = [c for c in SALES_HEADER if c != "Kts"]
    assert classify_sales_row(row) is RowRole.NOISE


def test_sales_summary_rules() -> None:
    assert classify_sales_row(["Sub Total", "10", "Diskon", "0"]) is RowRole.NOISE
    assert classify_sales_row(["x", "Sub Total", "Total"]) is RowRole.NOISE
