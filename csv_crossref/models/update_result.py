from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""UpdateResult: outcome of one cross-reference run, used for the SUMMARY line."""

__all__ = [
    "UpdateResult",
]


@dataclass(frozen=True)
class UpdateResult:
    """Aggregated result of :func:`csv_crossref.services.pipeline.run_update`."""
    files: int  # Uploaded files indexed
    sheet_rows: int  # Sheet data rows (header excluded)
    matched_rows: int  # Sheet data rows with at least one file label
    distinct_keys: int  # Distinct keys in the key index
    column: list[str]  # Output column, header label included
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    dry_run: bool = False  # True -> column computed but not written
