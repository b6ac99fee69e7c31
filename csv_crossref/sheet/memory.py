from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..errors import MissingColumnError
from .base import find_header_index

"""In-memory sheet: a list of rows, first row is the header."""

__all__ = [
    "InMemorySheet",
]


class InMemorySheet:
    def __init__(self, rows: list[list[Any]], name: str = "the current sheet") -> None:
        self.rows = rows
        self.name = name

    def describe(self) -> str:
        return self.name

    def read_key_column(self, column_name: str) -> list[Any]:
        if not self.rows:
            raise MissingColumnError(column_name, source=self.name, kind="sheet")
        idx = find_header_index(self.rows[0], column_name)
        if idx is None:
            raise MissingColumnError(column_name, source=self.name, kind="sheet")
        return [row[idx] if idx < len(row) else None for row in self.rows]

    def insert_column_left(self, values: Sequence[str]) -> None:
        for i, value in enumerate(values):
            if i < len(self.rows):
                self.rows[i].insert(0, value)
            else:
                self.rows.append([value])
        for row in self.rows[len(values):]:
            row.insert(0, "")
