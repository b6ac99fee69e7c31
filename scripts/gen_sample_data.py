#!/usr/bin/env python3
"""Sample data generator for trying out csv-crossref.

Writes:
- ``<out>/sheet.xlsx``: one worksheet with a ``number`` column and a name column
- ``<out>/uploads/file_<n>.csv``: CSV files, each holding a random subset of
  the sheet's numbers (some repeated, some unknown to the sheet)

Then run for example::

    csv-crossref --sheet out/sheet.xlsx out/uploads/*.csv
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd


def generate_sheet(rows: int, rng: np.random.Generator) -> pd.DataFrame:
    numbers = np.arange(1, rows + 1)
    return pd.DataFrame({
        "number": numbers,
        "name": [f"Item_{rng.integers(1000, 9999)}" for _ in numbers],
    })


def generate_upload(sheet: pd.DataFrame, rows: int, rng: np.random.Generator) -> pd.DataFrame:
    """Pick ``rows`` numbers, mostly from the sheet, with replacement."""
    known = rng.choice(sheet["number"].to_numpy(), size=rows, replace=True)
    # ~10% unknown numbers that will not match any sheet row
    unknown_mask = rng.random(rows) < 0.1
    known[unknown_mask] = rng.integers(len(sheet) + 1, len(sheet) * 2 + 2, unknown_mask.sum())
    return pd.DataFrame({
        "number": known,
        "amount": np.round(rng.uniform(0.01, 999.99, rows), 2),
        "note": [f"row {i + 1}, generated" for i in range(rows)],
    })


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a sample sheet and CSV uploads")
    parser.add_argument("output", type=Path, help="Output directory")
    parser.add_argument("--rows", type=int, default=1_000, help="Sheet data rows (default: 1,000)")
    parser.add_argument("--files", type=int, default=3, help="Number of CSV files (default: 3)")
    parser.add_argument("--file-rows", type=int, default=200, help="Data rows per CSV (default: 200)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0 or args.files <= 0 or args.file_rows <= 0:
        print("Error: --rows, --files and --file-rows must be positive", file=sys.stderr)
        return 1

    rng = np.random.default_rng(args.seed)
    uploads_dir = args.output / "uploads"
    uploads_dir.mkdir(parents=True, exist_ok=True)

    sheet = generate_sheet(args.rows, rng)
    sheet_path = args.output / "sheet.xlsx"
    sheet.to_excel(sheet_path, index=False, engine="openpyxl")
    print(f"sheet: {sheet_path} ({args.rows:,} rows)")

    for n in range(1, args.files + 1):
        path = uploads_dir / f"file_{n}.csv"
        generate_upload(sheet, args.file_rows, rng).to_csv(path, index=False)
        print(f"upload: {path} ({args.file_rows:,} rows)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
