from __future__ import annotations

from pathlib import Path

import pytest

from csv_crossref.errors import MissingColumnError, SheetError
from csv_crossref.sheet import CsvSheet, open_sheet


def test_read_key_column_keeps_text(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("name,number\na,007\nb,NA\n", encoding="utf-8")
    assert CsvSheet(path).read_key_column("number") == ["number", "007", "NA"]


def test_missing_column(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("name,id\na,1\n", encoding="utf-8")
    with pytest.raises(MissingColumnError) as e:
        CsvSheet(path).read_key_column("number")
    assert "sheet file sheet.csv" in str(e.value)


def test_empty_file_is_missing_column(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MissingColumnError):
        CsvSheet(path).read_key_column("number")


def test_insert_column_left_rewrites_file(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("name,number\na,1\nb,2\n", encoding="utf-8")
    CsvSheet(path).insert_column_left(["In Files", "x.csv", ""])
    assert path.read_text(encoding="utf-8").splitlines() == [
        "In Files,name,number",
        "x.csv,a,1",
        ",b,2",
    ]


def test_insert_length_mismatch(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("number\n1\n", encoding="utf-8")
    with pytest.raises(SheetError):
        CsvSheet(path).insert_column_left(["In Files"])


def test_open_sheet_rejects_sheet_name_for_csv(tmp_path: Path):
    assert isinstance(open_sheet(tmp_path / "s.csv"), CsvSheet)
    with pytest.raises(SheetError):
        open_sheet(tmp_path / "s.csv", sheet_name="Main")


def test_row_longer_than_header_is_tolerated(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("number,name\n1\n2,b,extra\n", encoding="utf-8")
    sheet = CsvSheet(path)
    assert sheet.read_key_column("number") == ["number", "1", "2"]

    sheet.insert_column_left(["In Files", "a.csv", ""])
    assert path.read_text(encoding="utf-8").splitlines() == [
        "In Files,number,name,",
        "a.csv,1,,",
        ",2,b,extra",
    ]


def test_trailing_blank_lines_are_not_rows(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_text("number\n1\n\n\n", encoding="utf-8")
    sheet = CsvSheet(path)
    assert sheet.read_key_column("number") == ["number", "1"]

    sheet.insert_column_left(["In Files", "a.csv"])
    assert path.read_text(encoding="utf-8") == "In Files,number\na.csv,1\n"


def test_utf8_bom_does_not_hide_header(tmp_path: Path):
    path = tmp_path / "sheet.csv"
    path.write_bytes("number\n1\n".encode("utf-8-sig"))
    assert CsvSheet(path).read_key_column("number") == ["number", "1"]
