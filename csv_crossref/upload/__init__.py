"""Upload adapters: files on disk and the JSON request payload."""

from .reader import parse_upload_payload, read_upload_files

__all__ = [
    "parse_upload_payload",
    "read_upload_files",
]
