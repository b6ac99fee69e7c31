from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from csv_crossref.errors import ConfigError, CrossRefError, MissingColumnError, SheetError, UploadError
from csv_crossref.models.error_record import ErrorRecord

"""Error log buffering.

- JSON Lines with a fixed set of keys
- One ``logs/errors-YYYYMMDD-HHMMSS.log`` (UTC) per run, created on first flush
- Records are buffered and appended in one write on flush
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
    "record_for_error",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"

_ERROR_TYPES: dict[type, str] = {
    UploadError: "UPLOAD_ERROR",
    SheetError: "SHEET_ERROR",
    ConfigError: "CONFIG_ERROR",
}


def record_for_error(error: CrossRefError) -> ErrorRecord:
    """Build an ErrorRecord from one of the package's exceptions."""
    if isinstance(error, MissingColumnError):
        error_type = "MISSING_COLUMN_CSV" if error.kind == "csv" else "MISSING_COLUMN_SHEET"
        return ErrorRecord.create(error.source, error.column, error_type, str(error))
    error_type = _ERROR_TYPES.get(type(error), "CROSSREF_ERROR")
    return ErrorRecord.create("", "", error_type, str(error))


class ErrorLogBuffer:
    """In-memory buffer for error records. Flush writes JSON Lines.

    The file path is decided on first access; writes are serial so no locking.
    """
    def __init__(self, logs_dir: Path | None = None) -> None:
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None
        self._logs_dir = logs_dir if logs_dir is not None else LOGS_DIR

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file.

        Returns the file path, or None when there was nothing to write.
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
