from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from ..models.options import CrossRefOptions
from ..models.update_result import UpdateResult
from ..models.upload import UploadedFile
from ..sheet.base import SheetAdapter
from .join import build_key_index
from .progress import ProgressTracker
from .projector import project_column

"""Cross-reference pipeline: uploads -> key index -> sheet column -> insert.

One invocation is a strict sequence with a single write at the end. The output
column is computed completely before the sheet is touched, so a failure at any
earlier step leaves the sheet unchanged and the run can simply be repeated.
"""

__all__ = [
    "run_update",
]

logger = logging.getLogger(__name__)


def run_update(
    uploads: Sequence[UploadedFile],
    sheet: SheetAdapter,
    options: CrossRefOptions | None = None,
    *,
    dry_run: bool = False,
) -> UpdateResult:
    """Add a leftmost column to ``sheet`` listing the uploads containing each row's key.

    Args:
        uploads: uploaded CSV files in user-selection order
        sheet: adapter for the sheet being augmented
        options: key column names, header label and separator
        dry_run: compute the column but do not write it

    Returns:
        UpdateResult with counts and the computed column

    Raises:
        MissingColumnError: an upload or the sheet lacks the key column
        SheetError: the sheet could not be read or written
    """
    options = options or CrossRefOptions()
    start_time = datetime.now(UTC)

    logger.info(f"indexing {len(uploads)} file(s) on column '{options.key_column}'")
    with ProgressTracker(len(uploads)) as tracker:
        key_index = build_key_index(tracker.track(uploads), options.key_column)
    logger.debug(f"key index built: distinct_keys={len(key_index)}")

    sheet_column = sheet.read_key_column(options.effective_sheet_column)
    column = project_column(
        key_index,
        sheet_column,
        header_label=options.header_label,
        separator=options.separator,
    )
    matched = sum(1 for value in column[1:] if value)

    if dry_run:
        logger.info("dry run: sheet not modified")
    else:
        sheet.insert_column_left(column)
        logger.info(f"inserted column '{options.header_label}' ({len(column)} cells) into {sheet.describe()}")

    end_time = datetime.now(UTC)
    return UpdateResult(
        files=len(uploads),
        sheet_rows=max(len(sheet_column) - 1, 0),
        matched_rows=matched,
        distinct_keys=len(key_index),
        column=column,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        dry_run=dry_run,
    )
