from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from ..models.options import DEFAULT_HEADER_LABEL, DEFAULT_SEPARATOR

"""Column projector: re-project the key index onto the sheet's row order."""

__all__ = [
    "cell_to_key",
    "project_column",
]


def cell_to_key(value: Any) -> str:
    """Coerce a sheet cell value to the string form used as a lookup key.

    Numbers render the way a spreadsheet shows them, so ``42`` and ``42.0``
    both become ``"42"`` and match a CSV field ``"42"``. Empty cells
    (None / NaN) become ``""``.

    Integral floats always render in full digits, so very large values such
    as ``1e21`` become ``"1000000000000000000000"`` rather than a spreadsheet
    style ``"1e+21"``; keys that large are not expected to be floats.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)
    # pandas hands back numpy scalars (np.int64, np.float64, np.bool_)
    if isinstance(value, np.generic):
        return cell_to_key(value.item())
    return str(value)


def project_column(
    key_index: Mapping[str, Sequence[str]],
    sheet_column: Sequence[Any],
    header_label: str = DEFAULT_HEADER_LABEL,
    separator: str = DEFAULT_SEPARATOR,
) -> list[str]:
    """Build the output column for a sheet key column (header at index 0).

    Row 0 is always ``header_label``. Every other row holds the joined file
    labels for that row's key, or ``""`` when the key is blank or unknown.
    Inputs are not modified.
    """
    column: list[str] = []
    for row_idx, value in enumerate(sheet_column):
        if row_idx == 0:
            column.append(header_label)
            continue
        key = cell_to_key(value)
        if key == "":
            column.append("")
            continue
        column.append(separator.join(key_index.get(key, ())))
    return column
