from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the JSON Lines error log.

One record is written per fatal error. File-level problems that are not tied
to an uploaded file (for example a missing sheet column) use ``file=""``.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Uploaded file label or sheet path the error refers to
        column: Key column being looked up ("" when not applicable)
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Human readable error message
    """
    timestamp: str
    file: str
    column: str
    error_type: str
    message: str

    @staticmethod
    def create(file: str, column: str, error_type: str, message: str) -> ErrorRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            column=column,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # dataclass -> dict so no extra keys leak into the log
        return json.dumps(asdict(self), ensure_ascii=False)
