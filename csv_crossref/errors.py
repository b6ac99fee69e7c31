from __future__ import annotations

"""Exception hierarchy shared by the indexer, sheet adapters and CLI.

Every error here is fatal to the current invocation; callers render the
message and stop. Row-level CSV malformation is not an error.
"""

__all__ = [
    "CrossRefError",
    "MissingColumnError",
    "UploadError",
    "SheetError",
    "ConfigError",
]


class CrossRefError(Exception):
    """Base exception for cross-reference failures."""


class MissingColumnError(CrossRefError):
    """Raised when a named key column is absent from a header row.

    ``kind`` is ``"csv"`` for uploaded files and ``"sheet"`` for the sheet
    being augmented; ``source`` is the file label or sheet description.
    """

    def __init__(self, column: str, source: str, kind: str = "csv") -> None:
        self.column = column
        self.source = source
        self.kind = kind
        if kind == "csv":
            message = f"No column named '{column}' in uploaded file {source}"
        else:
            message = f"No column named '{column}' in {source}"
        super().__init__(message)


class UploadError(CrossRefError):
    """Raised when uploaded files cannot be read or the payload is invalid."""


class SheetError(CrossRefError):
    """Raised when the sheet cannot be opened, read or written."""


class ConfigError(CrossRefError):
    pass
