"""Domain models for the CSV cross-reference tool."""

from .error_record import ErrorRecord
from .key_hit import KeyHit
from .options import CrossRefOptions
from .update_result import UpdateResult
from .upload import UploadedFile

__all__ = [
    "CrossRefOptions",
    "ErrorRecord",
    "KeyHit",
    "UpdateResult",
    "UploadedFile",
]
