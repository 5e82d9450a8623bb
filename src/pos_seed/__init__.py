"""POS Seed - legacy POS spreadsheet import for the retail backend.

This package turns the old POS system's Excel exports into typed records
and replays them into the new backend:

- **Items** (DATAITEMBARANG): flat item master table -> ItemSeed records
- **Purchases** (PEMBELIAN): multi-invoice report -> PurchaseDocument
- **Sales** (PENJUALAN): multi-receipt report -> SalesDocument, posted
  through the REST API

Module Structure:
    pos_seed.parsing: grid loading, cell parsing, row classification, reducers
    pos_seed.seeding: REST client and seeders
    pos_seed.config: SeedConfig (environment-driven settings)
    pos_seed.cli: ``pos-seed`` command line entry point

Quick Start:
    >>> from pos_seed.parsing import read_purchase_xls
    >>> doc = read_purchase_xls("scripts/PEMBELIAN.xls")
    >>> doc.entries[0].header.nomor
    'BL2601000002'
"""

__version__ = "0.1.0"

from pos_seed.config import SeedConfig
from pos_seed.exceptions import ApiError, ConfigError, ParseError, SeedError

__all__ = [
    "ApiError",
    "ConfigError",
    "ParseError",
    "SeedConfig",
    "SeedError",
    "__version__",
]
