"""Seeders that hand parsed documents to the backend.

Module Structure:
    seeding.client: REST adapter (session, login, branch, catalog, sales)
    seeding.sales: replay of PENJUALAN receipts through the API
    seeding.catalog: master-code and variant planning for the item import
"""

from pos_seed.seeding.catalog import build_item_variants, collect_master_codes
from pos_seed.seeding.client import SeedApiClient
from pos_seed.seeding.sales import SeedReport, run_sales_seed, seed_sales

__all__ = [
    "SeedApiClient",
    "SeedReport",
    "build_item_variants",
    "collect_master_codes",
    "run_sales_seed",
    "seed_sales",
]
