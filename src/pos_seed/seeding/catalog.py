"""Catalog planning for the item master import.

Derives what the backend needs before items can be created: the distinct
supplier, unit and category codes, and the unit variants of each item.
Nothing here talks to the API or the database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from pos_seed.parsing.models import ItemSeed


@dataclass
class MasterCodes:
    """Distinct master-data codes, in first-appearance order."""

    suppliers: List[str] = field(default_factory=list)
    units: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)


@dataclass
class VariantPlan:
    unit: str
    amount: float
    is_base_unit: bool
    sell_price: float

    def to_dict(self) -> dict:
        return {
            "unit": self.unit,
            "amount": self.amount,
            "isBaseUnit": self.is_base_unit,
            "sellPrice": self.sell_price,
        }


def _add(seq: List[str], value: str) -> None:
    if value not in seq:
        seq.append(value)


def collect_master_codes(items: Iterable[ItemSeed]) -> MasterCodes:
    """Collect the supplier, unit and category codes used by the items.

    The secondary unit only counts when the item has one.
    """
    codes = MasterCodes()
    for item in items:
        _add(codes.suppliers, item.kode_pemasok)
        _add(codes.units, item.satuan1)
        if item.satuan2:
            _add(codes.units, item.satuan2)
        _add(codes.categories, item.kode_jenis)
    return codes


def build_item_variants(item: ItemSeed) -> List[VariantPlan]:
    """Build the unit variants for one item.

    The base variant always exists. A secondary variant is added only when
    the unit, its quantity and its retail price are all filled in.

    Examples:
        >>> item = ItemSeed(kode_item="A1", nama_item="Teh", satuan1="PCS",
        ...                 kuantitas1=1, harga_jual_ecer1=3500)
        >>> [v.unit for v in build_item_variants(item)]
        ['PCS']
    """
    variants = [
        VariantPlan(
            unit=item.satuan1,
            amount=item.kuantitas1 or 1,
            is_base_unit=item.kuantitas1 == 1,
            sell_price=item.harga_jual_ecer1 or 0,
        )
    ]
    if item.satuan2 and item.kuantitas2 and item.harga_jual_ecer2:
        variants.append(
            VariantPlan(
                unit=item.satuan2,
                amount=item.kuantitas2,
                is_base_unit=False,
                sell_price=item.harga_jual_ecer2,
            )
        )
    return variants
