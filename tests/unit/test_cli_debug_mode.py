from __future__ import annotations

import logging
from pathlib import Path

from csv_crossref.cli import main as cli_main
from csv_crossref.logging.init import get_logger


def test_cli_debug_mode_enables_debug_logging(temp_workdir: Path, upload_dir: list[Path], capsys):
    sheet = temp_workdir / "sheet.csv"
    sheet.write_text("number\n1\n", encoding="utf-8")

    code = cli_main(["--debug", "--sheet", str(sheet), *map(str, upload_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert get_logger().level == logging.DEBUG
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG indexed fileA.csv: rows=1 absent_keys=0" in out


def test_cli_without_files_warns(temp_workdir: Path, capsys):
    sheet = temp_workdir / "sheet.csv"
    sheet.write_text("number\n1\n", encoding="utf-8")

    code = cli_main(["--sheet", str(sheet)])

    out = capsys.readouterr().out
    assert code == 0
    assert "WARN no CSV files given" in out
    assert sheet.read_text(encoding="utf-8").splitlines() == ["In Files,number", ",1"]


def test_cli_unsupported_sheet_type(temp_workdir: Path, upload_dir: list[Path], capsys):
    code = cli_main(["--sheet", str(temp_workdir / "sheet.ods"), *map(str, upload_dir)])
    assert code == 1
    assert "ERROR unsupported sheet file type: sheet.ods" in capsys.readouterr().out
