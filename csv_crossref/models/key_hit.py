from __future__ import annotations

from dataclasses import dataclass

"""KeyHit model: one key association extracted from a CSV data row."""

__all__ = [
    "KeyHit",
]


@dataclass(frozen=True)
class KeyHit:
    """Key value found on one data row of an uploaded file.

    ``key`` is None when the row is too short to reach the key column or the
    field is empty; such hits are counted but never enter the key index.
    ``row_number`` is the 1-based CSV record number (header = 1).
    """
    key: str | None
    label: str
    row_number: int

    @property
    def absent(self) -> bool:
        return self.key is None
