#!/usr/bin/env python3
"""Command line entry point for POS Seed.

Examples:
    Parse a purchase report to JSON:
        pos-seed purchase --input scripts/PEMBELIAN.xls --output pembelian.json

    Parse the item master and show the catalog plan:
        pos-seed items --input scripts/DATAITEMBARANG.xls --plan

    Replay sales receipts through the API:
        SEED_API_BASE=http://localhost:9999/api pos-seed seed-sales \\
            --input scripts/PENJUALAN.xls

Environment (optional):
  SEED_API_BASE, ADMIN_EMAIL, ADMIN_PASSWORD, SEED_TIMEOUT, SEED_RETRIES
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pos_seed.config import SeedConfig
from pos_seed.exceptions import SeedError
from pos_seed.parsing import read_items_xls, read_purchase_xls, read_sales_xls
from pos_seed.seeding.catalog import build_item_variants, collect_master_codes
from pos_seed.seeding.sales import run_sales_seed

logger = logging.getLogger(__name__)


@dataclass
class Args:
    command: str
    input: Path
    output: Optional[Path]
    plan: bool
    quiet: bool
    verbose: bool


def parse_args(argv: Optional[list[str]] = None) -> Args:
    p = argparse.ArgumentParser(
        prog="pos-seed", description="Import legacy POS Excel exports"
    )
    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("items", "Parse the item master (DATAITEMBARANG) to JSON"),
        ("purchase", "Parse a purchase report (PEMBELIAN) to JSON"),
        ("sales", "Parse a sales report (PENJUALAN) to JSON"),
        ("seed-sales", "Post a sales report through the REST API"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("--input", type=Path, required=True, help="Workbook (.xls/.xlsx)")
        sp.add_argument("--output", type=Path, help="Write JSON here instead of stdout")
        if name == "items":
            sp.add_argument(
                "--plan", action="store_true", help="Include master codes and unit variants"
            )
        sp.add_argument("--quiet", action="store_true", help="Less logging")
        sp.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    a = p.parse_args(argv)
    return Args(
        command=a.command,
        input=a.input,
        output=a.output,
        plan=getattr(a, "plan", False),
        quiet=a.quiet,
        verbose=a.verbose,
    )


def _items_payload(path: Path, plan: bool) -> Any:
    items = read_items_xls(path)
    if not plan:
        return [item.to_dict() for item in items]
    codes = collect_master_codes(items)
    return {
        "suppliers": codes.suppliers,
        "units": codes.units,
        "categories": codes.categories,
        "items": [
            {**item.to_dict(), "variants": [v.to_dict() for v in build_item_variants(item)]}
            for item in items
        ],
    }


def write_json(data: Any, out_path: Optional[Path]) -> None:
    text = json.dumps(data, ensure_ascii=False, indent=2)
    if out_path is None:
        sys.stdout.write(text + "\n")
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", out_path)


def run(args: Args) -> int:
    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")

    if args.command == "items":
        write_json(_items_payload(args.input, args.plan), args.output)
    elif args.command == "purchase":
        write_json(read_purchase_xls(args.input).to_dict(), args.output)
    elif args.command == "sales":
        write_json(read_sales_xls(args.input).to_dict(), args.output)
    else:
        report = run_sales_seed(args.input, SeedConfig.from_env())
        logger.info("Success: %d", report.success)
        logger.info("Failed: %d", report.failed)
        logger.info("Skipped: %d", report.skipped)
        if args.output is not None:
            write_json(
                {
                    "success": report.success,
                    "failed": report.failed,
                    "skipped": report.skipped,
                    "failures": report.failures,
                },
                args.output,
            )
        return 1 if report.failed else 0
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        return run(args)
    except SeedError as e:
        logger.error("%s", e)
        return 2
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
