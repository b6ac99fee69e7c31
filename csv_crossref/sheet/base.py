from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

"""Sheet adapter interface.

The pipeline only talks to the sheet through these two operations, so the
core can run against an in-memory grid, an .xlsx workbook or a CSV file.
"""

__all__ = [
    "SheetAdapter",
    "find_header_index",
]


class SheetAdapter(Protocol):
    def read_key_column(self, column_name: str) -> list[Any]:
        """Return the named column top-down, header cell included.

        Raises MissingColumnError (kind="sheet") if no header cell matches.
        """
        ...

    def insert_column_left(self, values: Sequence[str]) -> None:
        """Insert ``values`` as a new first column, shifting existing cells right."""
        ...

    def describe(self) -> str:
        """Short description used in log and error messages."""
        ...


def find_header_index(header: Sequence[Any], column_name: str) -> int | None:
    """Index of the first header cell equal to column_name (exact match)."""
    for idx, cell in enumerate(header):
        if cell == column_name:
            return idx
    return None
