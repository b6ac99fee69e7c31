from __future__ import annotations

import json

from csv_crossref.errors import MissingColumnError
from csv_crossref.logging.error_log import record_for_error

"""Error log contract: one JSON object per line with a fixed key set."""

REQUIRED_KEYS = {"timestamp", "file", "column", "error_type", "message"}


def test_error_log_line_schema():
    line = record_for_error(MissingColumnError("number", "bad.csv")).to_json_line()
    data = json.loads(line)
    assert set(data.keys()) == REQUIRED_KEYS
    assert data["error_type"].isupper()
    assert "\n" not in line


def test_error_log_line_keeps_non_ascii():
    line = record_for_error(MissingColumnError("番号", "ファイル.csv")).to_json_line()
    assert "ファイル.csv" in line
