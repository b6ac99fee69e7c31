from __future__ import annotations

from dataclasses import dataclass

"""Options for one cross-reference run.

Defaults reproduce the original add-on: join on ``number`` in both the uploaded
files and the sheet, and head the new column ``In Files``.
"""

__all__ = [
    "CrossRefOptions",
    "DEFAULT_KEY_COLUMN",
    "DEFAULT_HEADER_LABEL",
    "DEFAULT_SEPARATOR",
]

DEFAULT_KEY_COLUMN = "number"
DEFAULT_HEADER_LABEL = "In Files"
DEFAULT_SEPARATOR = ","


@dataclass(frozen=True)
class CrossRefOptions:
    key_column: str = DEFAULT_KEY_COLUMN  # Column looked up in each uploaded CSV
    sheet_key_column: str | None = None  # Sheet column; None -> same as key_column
    header_label: str = DEFAULT_HEADER_LABEL  # Row 0 of the inserted column
    separator: str = DEFAULT_SEPARATOR  # Joins file labels within one cell

    @property
    def effective_sheet_column(self) -> str:
        return self.sheet_key_column or self.key_column
