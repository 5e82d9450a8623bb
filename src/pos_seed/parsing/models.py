"""Typed records produced by the spreadsheet parsers.

Every document kind gets an explicit dataclass with named optional fields.
``None`` always means "absent", which is distinct from zero or empty text.
``to_dict()`` renders the camelCase keys the backend API and the JSON dumps
use.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from pos_seed.parsing.cleaning_utils import to_camel


class _Record:
    """Mixin rendering dataclass fields (recursively) as camelCase dicts."""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            out[to_camel(f.name)] = _render(getattr(self, f.name))
        return out


def _render(value: Any) -> Any:
    if isinstance(value, _Record):
        return value.to_dict()
    if isinstance(value, list):
        return [_render(v) for v in value]
    return value


@dataclass
class DocumentMeta(_Record):
    """Report-level metadata from row 0 (app name, report title, contact)."""

    app: Optional[str] = None
    report: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None


# --------------------------- purchases ---------------------------


@dataclass
class PurchaseHeader(_Record):
    """Invoice-level fields of one purchase (dates are ISO ``yyyy-mm-dd``)."""

    nomor: Optional[str] = None
    admin: Optional[str] = None
    tanggal: Optional[str] = None
    pemasok: Optional[str] = None
    jatuh_tempo: Optional[str] = None
    lokasi: Optional[str] = None


@dataclass
class PurchaseItem(_Record):
    """One purchased line: No | Kode | Nama | Kuantitas | Sat | Harga Beli | Diskon | Jumlah."""

    no: int
    kode: str
    nama: str
    kuantitas: Optional[float] = None
    sat: str = ""
    harga_beli: Optional[float] = None
    diskon: Optional[float] = None
    jumlah: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.kode or self.nama)


@dataclass
class PurchaseSummary(_Record):
    keterangan: Optional[str] = None
    sub_total: Optional[float] = None
    diskon: Optional[float] = None
    total: Optional[float] = None


@dataclass
class PurchaseEntry(_Record):
    header: PurchaseHeader
    items: List[PurchaseItem] = field(default_factory=list)
    summary: Optional[PurchaseSummary] = None


@dataclass
class PurchaseDocument(_Record):
    meta: Optional[DocumentMeta] = None
    entries: List[PurchaseEntry] = field(default_factory=list)


# --------------------------- sales ---------------------------


@dataclass
class SalesItem(_Record):
    """One sold line.

    Columns: No | Kode | Nama | Kts | Sat | Harga Pokok | Harga Jual |
    Diskon | Laba | Jumlah.
    """

    no: int
    kode: str
    nama: str
    kts: Optional[float] = None
    sat: str = ""
    harga_pokok: Optional[float] = None
    harga_jual: Optional[float] = None
    diskon: Optional[float] = None
    laba: Optional[float] = None
    jumlah: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.kode or self.nama)


@dataclass
class SalesSummary(_Record):
    sub_total: Optional[float] = None
    diskon: Optional[float] = None
    total: Optional[float] = None


@dataclass
class SalesEntry(_Record):
    """One sales receipt; only the transaction number is kept as header."""

    nomor: str
    items: List[SalesItem] = field(default_factory=list)
    summary: Optional[SalesSummary] = None


@dataclass
class SalesDocument(_Record):
    meta: Optional[DocumentMeta] = None
    entries: List[SalesEntry] = field(default_factory=list)


# --------------------------- item catalog ---------------------------


@dataclass
class ItemSeed(_Record):
    """One catalog item from the item master export.

    ``satuan2`` is None when the item has no secondary unit.
    """

    kode_item: str
    nama_item: str
    kode_jenis: str = ""
    kode_pemasok: str = ""
    harga_beli: Optional[float] = None
    harga_pokok: Optional[float] = None
    satuan1: str = ""
    satuan2: Optional[str] = None
    kuantitas1: Optional[float] = None
    kuantitas2: Optional[float] = None
    harga_jual_ecer1: Optional[float] = None
    harga_jual_ecer2: Optional[float] = None
    harga_jual_grosir1: Optional[float] = None
    harga_jual_grosir2: Optional[float] = None
    harga_jual_khusus1: Optional[float] = None
    harga_jual_khusus2: Optional[float] = None
    stok: Optional[float] = None
    upload: str = ""
    tipe: str = ""
