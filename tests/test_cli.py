"""Tests for the command-line interface."""

import json

import pytest

from receipt_engine.cli import main


def test_receipt_from_arguments(capsys):
    main(["receipt", "1 book at 12.49", "1 music CD at 14.99", "1 chocolate bar at 0.85"])
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1 book: 12.49",
        "1 music CD: 16.49",
        "1 chocolate bar: 0.85",
        "Sales Taxes: 1.50",
        "Total: 29.83",
    ]


def test_receipt_with_header(capsys):
    main(["receipt", "--header", "Output 3:", "1 box of imported chocolates at 11.25"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Output 3:"
    assert lines[1] == "1 imported box of chocolates: 11.85"


def test_receipt_from_file(tmp_path, capsys):
    basket = tmp_path / "basket.txt"
    basket.write_text(
        "# second sample basket\n"
        "1 imported box of chocolates at 10.00\n"
        "\n"
        "1 imported bottle of perfume at 47.50\n",
        encoding="utf-8",
    )
    main(["receipt", "--file", str(basket)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Sales Taxes: 7.65", "Total: 65.15"]


def test_receipt_table_output(capsys):
    main(["receipt", "--table", "1 music CD at 14.99"])
    out = capsys.readouterr().out
    assert "music CD" in out
    assert "16.49" in out
    assert "Total: 16.49" in out


def test_receipt_export(tmp_path, capsys):
    main(
        [
            "receipt",
            "1 music CD at 14.99",
            "--export-json",
            "receipt.json",
            "--export-csv",
            "receipt.csv",
            "--output-dir",
            str(tmp_path),
        ]
    )
    data = json.loads((tmp_path / "receipt.json").read_text(encoding="utf-8"))
    assert data["summary"]["total"] == "16.49"
    assert (tmp_path / "receipt.csv").exists()


def test_invalid_item_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["receipt", "1 music CD at 14.99", "book at 12.49"])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Invalid item" in out
    assert "Total" not in out


def test_missing_file_exits_nonzero(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["receipt", "--file", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1


def test_no_items_exits_nonzero():
    with pytest.raises(SystemExit) as exc:
        main(["receipt"])
    assert exc.value.code == 1


def test_demo_prints_sample_receipts(capsys):
    main(["demo"])
    out = capsys.readouterr().out
    for header in ("Output 1:", "Output 2:", "Output 3:"):
        assert header in out
    assert "Total: 29.83" in out
    assert "Total: 65.15" in out
    assert "Total: 74.68" in out


def test_rates(capsys):
    main(["rates"])
    out = capsys.readouterr().out
    assert "10%" in out
    assert "5%" in out
    assert "packet of headache pills" in out


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0


def test_huge_cost_prints_receipt(capsys):
    main(["receipt", "1 yacht at 1" + "0" * 26])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "1 yacht: " + "11" + "0" * 25 + ".00",
        "Sales Taxes: " + "1" + "0" * 25 + ".00",
        "Total: " + "11" + "0" * 25 + ".00",
    ]
