from __future__ import annotations

from ..models.update_result import UpdateResult

"""Summary line rendering.

Format:
SUMMARY files={files} rows={rows} matched={matched} keys={keys} elapsed_sec={elapsed}
(``dry_run=1`` is appended for dry runs)
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for very small numbers
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: UpdateResult) -> str:
    """Render the SUMMARY line for an UpdateResult.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = UpdateResult(
        ...     files=2, sheet_rows=3, matched_rows=2, distinct_keys=2,
        ...     column=[], start_time=t, end_time=t, elapsed_seconds=1.5,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=2 rows=3 matched=2 keys=2 elapsed_sec=1.5'
    """
    line = (
        f"SUMMARY files={result.files} "
        f"rows={result.sheet_rows} "
        f"matched={result.matched_rows} "
        f"keys={result.distinct_keys} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
    if result.dry_run:
        line += " dry_run=1"
    return line
