from __future__ import annotations

import csv
import io
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import MissingColumnError, SheetError
from .base import find_header_index

"""CSV sheet adapter (pandas).

Records are read with the csv module and padded with "" to the widest
record, so ragged rows load instead of failing the whole run. Every cell
stays the text that was written (no NA conversion). Blank lines at the end
of the file are dropped. The first record is treated as the header, like the
first row of a worksheet.
"""

__all__ = [
    "CsvSheet",
]


class CsvSheet:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return f"sheet file {self.path.name}"

    def _read_frame(self) -> pd.DataFrame:
        if not self.path.exists():
            raise SheetError(f"sheet file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise SheetError(f"cannot parse sheet file {self.path}: {e}") from e
        except OSError as e:
            raise SheetError(f"cannot read sheet file {self.path}: {e}") from e
        rows = list(csv.reader(io.StringIO(text, newline="")))
        while rows and rows[-1] == []:
            rows.pop()
        if not rows:
            return pd.DataFrame()
        width = max(len(row) for row in rows)
        padded = [row + [""] * (width - len(row)) for row in rows]
        return pd.DataFrame(padded, columns=range(width), dtype=str)

    def read_key_column(self, column_name: str) -> list[Any]:
        df = self._read_frame()
        if df.shape[0] == 0:
            raise MissingColumnError(column_name, source=self.describe(), kind="sheet")
        idx = find_header_index(df.iloc[0].tolist(), column_name)
        if idx is None:
            raise MissingColumnError(column_name, source=self.describe(), kind="sheet")
        return df.iloc[:, idx].tolist()

    def insert_column_left(self, values: Sequence[str]) -> None:
        df = self._read_frame()
        if len(values) != df.shape[0]:
            raise SheetError(
                f"column length {len(values)} does not match {df.shape[0]} rows in {self.path.name}"
            )
        # positional labels 0..n-1 -> shift right by one to make room
        df.columns = range(1, df.shape[1] + 1)
        df.insert(0, 0, list(values))
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        try:
            df.to_csv(tmp, header=False, index=False)
            os.replace(tmp, self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise SheetError(f"cannot write sheet file {self.path}: {e}") from e
