"""Spreadsheet-to-record parsers for legacy POS exports.

Module Structure:
    parsing.grid: workbook -> grid of text cells
    parsing.cleaning_utils: number/date/text cell conversions
    parsing.classify: row role predicates
    parsing.reducer: flat rows -> transaction entries
    parsing.purchase / parsing.sales / parsing.items: per-export parsers
"""

from pos_seed.parsing.items import read_items_xls
from pos_seed.parsing.purchase import read_purchase_xls
from pos_seed.parsing.sales import read_sales_xls

__all__ = [
    "read_items_xls",
    "read_purchase_xls",
    "read_sales_xls",
]
