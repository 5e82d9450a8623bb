"""Tests for item catalog planning."""

from pos_seed.parsing.models import ItemSeed
from pos_seed.seeding.catalog import build_item_variants, collect_master_codes


def _item(**kwargs) -> ItemSeed:
    base = {"kode_item": "A1", "nama_item": "Teh"}
    base.update(kwargs)
    return ItemSeed(**base)


def test_collect_master_codes_keeps_first_appearance_order() -> None:
    items = [
        _item(kode_pemasok="SUP2", satuan1="PCS", satuan2="DUS", kode_jenis="MNM"),
        _item(kode_pemasok="SUP1", satuan1="KG", kode_jenis="SMB"),
        _item(kode_pemasok="SUP2", satuan1="PCS", kode_jenis="MNM"),
    ]
    codes = collect_master_codes(items)
    assert codes.suppliers == ["SUP2", "SUP1"]
    assert codes.units == ["PCS", "DUS", "KG"]
    assert codes.categories == ["MNM", "SMB"]


def test_single_unit_item() -> None:
    variants = build_item_variants(_item(satuan1="PCS", kuantitas1=1, harga_jual_ecer1=3500))
    assert len(variants) == 1
    assert variants[0].unit == "PCS"
    assert variants[0].amount == 1
    assert variants[0].is_base_unit is True
    assert variants[0].sell_price == 3500


def test_base_variant_defaults() -> None:
    (variant,) = build_item_variants(_item(satuan1="PCS"))
    assert variant.amount == 1
    assert variant.is_base_unit is False
    assert variant.sell_price == 0


def test_second_variant_needs_unit_quantity_and_price() -> None:
    full = _item(satuan1="PCS", kuantitas1=1, satuan2="DUS", kuantitas2=24, harga_jual_ecer2=80000)
    variants = build_item_variants(full)
    assert [v.unit for v in variants] == ["PCS", "DUS"]
    assert variants[1].amount == 24
    assert variants[1].is_base_unit is False
    assert variants[1].to_dict() == {
        "unit": "DUS",
        "amount": 24,
        "isBaseUnit": False,
        "sellPrice": 80000,
    }

    no_price = _item(satuan1="PCS", satuan2="DUS", kuantitas2=24)
    assert len(build_item_variants(no_price)) == 1
