from __future__ import annotations

import logging
import os
import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils import column_index_from_string, get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from ..errors import MissingColumnError, SheetError
from .base import find_header_index

"""Workbook sheet adapter (.xlsx via openpyxl).

Reading uses cached cell values (``data_only=True``) so formula cells compare
by their displayed value. Writing reloads the workbook with formulas intact,
inserts the column, and replaces the file in one step.
"""

__all__ = [
    "WorkbookSheet",
]

logger = logging.getLogger(__name__)

# Extra characters added to the widest value when sizing the new column
WIDTH_PADDING = 2
MIN_WIDTH = 8


class WorkbookSheet:
    """Active (or named) worksheet of an .xlsx workbook on disk."""

    def __init__(self, path: Path, sheet_name: str | None = None) -> None:
        self.path = Path(path)
        self.sheet_name = sheet_name

    def describe(self) -> str:
        if self.sheet_name:
            return f"sheet '{self.sheet_name}' of {self.path.name}"
        return f"the active sheet of {self.path.name}"

    def _load(self, *, data_only: bool) -> Workbook:
        if not self.path.exists():
            raise SheetError(f"workbook not found: {self.path}")
        try:
            return load_workbook(self.path, data_only=data_only)
        except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as e:
            raise SheetError(f"cannot open workbook {self.path}: {e}") from e

    def _worksheet(self, wb: Workbook) -> Worksheet:
        if self.sheet_name is None:
            ws = wb.active
            if ws is None:
                raise SheetError(f"workbook has no active sheet: {self.path}")
            return ws
        try:
            return wb[self.sheet_name]
        except KeyError as e:
            raise SheetError(f"no sheet named '{self.sheet_name}' in {self.path.name}") from e

    def read_key_column(self, column_name: str) -> list[Any]:
        wb = self._load(data_only=True)
        try:
            ws = self._worksheet(wb)
            rows = list(ws.iter_rows(values_only=True))
        finally:
            wb.close()
        if not rows:
            raise MissingColumnError(column_name, source=self.describe(), kind="sheet")
        idx = find_header_index(rows[0], column_name)
        if idx is None:
            raise MissingColumnError(column_name, source=self.describe(), kind="sheet")
        return [row[idx] if idx < len(row) else None for row in rows]

    def insert_column_left(self, values: Sequence[str]) -> None:
        wb = self._load(data_only=False)
        ws = self._worksheet(wb)
        _shift_column_widths(ws)
        ws.insert_cols(1)
        for row_idx, value in enumerate(values, start=1):
            ws.cell(row=row_idx, column=1, value=value)
        ws.column_dimensions["A"].width = _fit_width(values)
        self._save(wb)
        logger.debug(f"saved {self.path} ({len(values)} cells in column A)")

    def _save(self, wb: Workbook) -> None:
        tmp = self.path.with_name(f".{self.path.stem}.tmp{self.path.suffix}")
        try:
            wb.save(tmp)
            os.replace(tmp, self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise SheetError(f"cannot write workbook {self.path}: {e}") from e


def _fit_width(values: Sequence[str]) -> float:
    longest = max((len(str(v)) for v in values if v is not None), default=0)
    return max(longest + WIDTH_PADDING, MIN_WIDTH)


def _shift_column_widths(ws: Worksheet) -> None:
    # insert_cols() moves cells but not column widths; a dimension may span min..max
    spans: list[tuple[int, int, float]] = []
    for letter, dim in list(ws.column_dimensions.items()):
        if dim.customWidth and dim.width:
            start = dim.min or column_index_from_string(letter)
            end = dim.max or start
            spans.append((start, end, dim.width))
            del ws.column_dimensions[letter]
    for start, end, width in spans:
        shifted = ws.column_dimensions[get_column_letter(start + 1)]
        shifted.width = width
        shifted.min = start + 1
        shifted.max = end + 1
