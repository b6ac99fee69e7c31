"""Sheet adapters: in-memory grid, .xlsx workbook, CSV sheet file."""

from __future__ import annotations

from pathlib import Path

from ..errors import SheetError
from .base import SheetAdapter
from .csv_sheet import CsvSheet
from .memory import InMemorySheet
from .workbook import WorkbookSheet

__all__ = [
    "CsvSheet",
    "InMemorySheet",
    "SheetAdapter",
    "WorkbookSheet",
    "open_sheet",
]

WORKBOOK_SUFFIXES = {".xlsx"}


def open_sheet(path: Path, sheet_name: str | None = None) -> SheetAdapter:
    """Pick a sheet adapter by file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        return WorkbookSheet(path, sheet_name=sheet_name)
    if suffix == ".csv":
        if sheet_name:
            raise SheetError(f"sheet name given for a CSV sheet file: {path.name}")
        return CsvSheet(path)
    raise SheetError(f"unsupported sheet file type: {path.name}")
