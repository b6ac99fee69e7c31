from __future__ import annotations

import csv
import io
import logging

from ..errors import MissingColumnError
from ..models.key_hit import KeyHit

"""CSV indexer: extract key values from one uploaded CSV payload.

Parsing follows the standard CSV rules only (comma delimiter, double-quoted
fields, embedded quotes doubled). The first record is the header; the key
column is located by exact, case-sensitive match.

Row-level malformation is tolerated: a record shorter than the key column, or
an empty key field, produces a KeyHit with ``key=None`` instead of an error.
A missing key column is fatal for the payload.
"""

__all__ = [
    "parse_csv",
    "find_column",
    "index_csv",
]

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def parse_csv(contents: str) -> list[list[str]]:
    """Parse CSV text into records of string fields."""
    if contents.startswith(_BOM):
        contents = contents[len(_BOM):]
    reader = csv.reader(io.StringIO(contents, newline=""), delimiter=",", quotechar='"', doublequote=True)
    return [row for row in reader]


def find_column(header: list[str], column_name: str) -> int | None:
    """Return the index of the first header field equal to column_name."""
    try:
        return header.index(column_name)
    except ValueError:
        return None


def index_csv(contents: str, column_name: str, label: str) -> list[KeyHit]:
    """Extract one KeyHit per data row of a CSV payload, in row order.

    Parameters
    ----------
    contents: raw CSV text
    column_name: header name of the key column
    label: file label attached to every hit (the uploaded file name)

    Raises
    ------
    MissingColumnError: the header row lacks ``column_name`` (or there is no
        header row at all); ``source`` is ``label``.
    """
    rows = parse_csv(contents)
    if not rows:
        raise MissingColumnError(column_name, source=label)
    idx = find_column(rows[0], column_name)
    if idx is None:
        raise MissingColumnError(column_name, source=label)

    hits: list[KeyHit] = []
    short_rows = 0
    for row_number, row in enumerate(rows[1:], start=2):
        if idx >= len(row):
            short_rows += 1
            hits.append(KeyHit(key=None, label=label, row_number=row_number))
            continue
        value = row[idx]
        hits.append(KeyHit(key=value if value != "" else None, label=label, row_number=row_number))

    if short_rows:
        logger.debug(f"{label}: {short_rows} row(s) shorter than column '{column_name}'")
    return hits
