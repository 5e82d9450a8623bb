"""Tests for the pos-seed command line."""

import json
from pathlib import Path

import pytest

from pos_seed import cli
from pos_seed.exceptions import ParseError
from tests.test_utils import (
    META_ROW,
    PURCHASE_HEADER,
    PURCHASE_SUMMARY,
    write_workbook,
)


def test_parse_args_defaults() -> None:
    args = cli.parse_args(["purchase", "--input", "PEMBELIAN.xls"])
    assert args.command == "purchase"
    assert args.input == Path("PEMBELIAN.xls")
    assert args.output is None
    assert args.plan is False


def test_purchase_to_json_file(tmp_path: Path) -> None:
    src = write_workbook(
        tmp_path / "PEMBELIAN.xlsx",
        [META_ROW, PURCHASE_HEADER, ["1", "SKU1", "Item One", "2", "PCS", "10000", "0", "20000"], PURCHASE_SUMMARY],
    )
    out = tmp_path / "out" / "pembelian.json"

    assert cli.main(["purchase", "--input", str(src), "--output", str(out), "--quiet"]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    entry = data["entries"][0]
    assert entry["header"]["nomor"] == "BL2601000002"
    assert entry["items"][0]["hargaBeli"] == 10000
    assert entry["summary"]["total"] == 20000
    assert data["meta"]["report"] == "PEMBELIAN"


def test_items_plan_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = write_workbook(
        tmp_path / "DATAITEMBARANG.xlsx",
        [
            ["KodeItem", "NamaItem", "KodePemasok", "Satuan1", "Satuan2", "Kuantitas2", "HargaJualEcer1", "HargaJualEcer2"],
            ["SKU1", "Teh Botol", "SUP01", "PCS", "DUS", "24", "3500", "80000"],
        ],
    )

    assert cli.main(["items", "--input", str(src), "--plan", "--quiet"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["suppliers"] == ["SUP01"]
    assert data["items"][0]["kodeItem"] == "SKU1"
    assert [v["unit"] for v in data["items"][0]["variants"]] == ["PCS", "DUS"]


def test_missing_input_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["sales", "--input", str(tmp_path / "nope.xls"), "--quiet"])


def test_seed_errors_return_exit_code_2(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    src = tmp_path / "PENJUALAN.xls"
    src.write_bytes(b"")

    def broken(path: Path) -> None:
        raise ParseError("unreadable workbook")

    monkeypatch.setattr(cli, "read_sales_xls", broken)
    assert cli.main(["sales", "--input", str(src), "--quiet"]) == 2


def test_interrupt_returns_exit_code_130(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    src = tmp_path / "PENJUALAN.xls"
    src.write_bytes(b"")

    def interrupted(path: Path) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "read_sales_xls", interrupted)
    assert cli.main(["sales", "--input", str(src), "--quiet"]) == 130
