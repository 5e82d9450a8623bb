"""Sales seeder: replay PENJUALAN receipts through the backend API.

Every parsed receipt becomes one ``POST /transaction/sales``. Line items are
matched to the live catalog by exact item code and to a unit variant by
case-insensitive unit name. Prices always come from the catalog: the
spreadsheet's own totals are informational and are never sent.

Discounts are not replayed. Whether the export's ``Diskon`` column is a
per-unit amount or a line discount already folded into ``Jumlah`` is not
known, so every line is posted with an empty discount list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pos_seed.config import SeedConfig
from pos_seed.exceptions import ApiError
from pos_seed.parsing.models import SalesDocument, SalesEntry
from pos_seed.parsing.sales import read_sales_xls
from pos_seed.seeding.client import Branch, CatalogItem, CatalogVariant, SeedApiClient

logger = logging.getLogger(__name__)

PAYMENT_TYPE = "CASH"


@dataclass
class SalesPlan:
    """Payload for one receipt plus the catalog-priced total it implies."""

    nomor: str
    payload: Dict[str, Any]
    expected_total: float


@dataclass
class SeedReport:
    success: int = 0
    failed: int = 0
    skipped: int = 0
    failures: List[str] = field(default_factory=list)


def build_item_map(items: Iterable[CatalogItem]) -> Dict[str, CatalogItem]:
    """Index catalog items by exact code; later duplicates win."""
    return {item.code: item for item in items}


def resolve_variant(item: CatalogItem, unit: str) -> Optional[CatalogVariant]:
    """Pick the catalog variant for a spreadsheet unit label.

    Matches the unit case-insensitively. When nothing matches and the item
    has exactly one variant, that variant is used.

    Examples:
        >>> item = CatalogItem(1, "A1", "Teh", [CatalogVariant(10, "PCS"), CatalogVariant(11, "DUS")])
        >>> resolve_variant(item, "pcs").id
        10
    """
    wanted = (unit or "").lower()
    for variant in item.variants:
        if (variant.unit or "").lower() == wanted:
            return variant
    if len(item.variants) == 1:
        return item.variants[0]
    return None


def build_sales_payload(
    entry: SalesEntry, item_map: Dict[str, CatalogItem], branch_id: int
) -> Optional[SalesPlan]:
    """Map one receipt onto catalog variants.

    Unknown codes and unresolved units are skipped with a warning. A missing
    or zero quantity counts as 1.

    Args:
        entry: Parsed receipt.
        item_map: Catalog items by code.
        branch_id: Branch the sale is booked on.

    Returns:
        SalesPlan, or None when no line could be matched.
    """
    expected_total = 0.0
    sales_items: List[Dict[str, Any]] = []

    for raw in entry.items:
        item = item_map.get(raw.kode)
        if item is None:
            logger.warning("Item not found: %s (%s) in %s", raw.kode, raw.nama, entry.nomor)
            continue

        variant = resolve_variant(item, raw.sat)
        if variant is None:
            logger.warning(
                "Variant not found for item %s unit %s in %s", item.code, raw.sat, entry.nomor
            )
            continue

        qty = raw.kts or 1
        expected_total += variant.sell_price * qty
        sales_items.append(
            {
                "masterItemVariantId": variant.id,
                "qty": qty,
                "discounts": [],
            }
        )

    if not sales_items:
        return None

    payload = {
        "branchId": branch_id,
        "notes": f"Original Invoice: {entry.nomor}",
        "cashReceived": expected_total,
        "paymentType": PAYMENT_TYPE,
        "items": sales_items,
    }
    return SalesPlan(nomor=entry.nomor, payload=payload, expected_total=expected_total)


def seed_sales(
    doc: SalesDocument,
    client: SeedApiClient,
    branch: Branch,
    catalog: Iterable[CatalogItem],
) -> SeedReport:
    """Post every receipt of a sales document.

    A failure on one receipt is logged and counted; the run continues with
    the next one.

    Returns:
        SeedReport with success, failure and skip counts.
    """
    item_map = build_item_map(catalog)
    report = SeedReport()

    for entry in doc.entries:
        if not entry.items:
            logger.warning("Skipping %s: no items", entry.nomor)
            report.skipped += 1
            continue

        plan = build_sales_payload(entry, item_map, branch.id)
        if plan is None:
            logger.warning("Skipping %s: no valid items mapped", entry.nomor)
            report.skipped += 1
            continue

        try:
            client.create_sales(plan.payload)
        except ApiError as e:
            report.failed += 1
            report.failures.append(entry.nomor)
            logger.error("Failed %s: %s", entry.nomor, e)
            continue

        report.success += 1
        logger.info("Created sales %s (total %.2f)", entry.nomor, plan.expected_total)

    logger.info(
        "Seed sales completed: success=%d failed=%d skipped=%d",
        report.success,
        report.failed,
        report.skipped,
    )
    return report


def run_sales_seed(
    path: str | Path, config: SeedConfig, client: Optional[SeedApiClient] = None
) -> SeedReport:
    """Log in, parse the workbook and post every receipt.

    Args:
        path: PENJUALAN workbook.
        config: API settings and credentials.
        client: Optional client (defaults to one built from config).

    Returns:
        SeedReport for the run.
    """
    client = client or SeedApiClient.from_config(config)
    client.login(config.admin_name, config.admin_password)

    doc = read_sales_xls(path)
    if not doc.entries:
        logger.warning("No sales transactions found in %s", path)
        return SeedReport()

    branch = client.get_first_branch()
    logger.info("Using branch: %s", branch.name)

    catalog = client.get_all_items()
    logger.info("Fetched %d items from API", len(catalog))

    return seed_sales(doc, client, branch, catalog)
