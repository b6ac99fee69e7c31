from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import ValidationError

from ..errors import UploadError
from ..models.upload import UploadedFile

"""Upload readers.

Both readers return UploadedFile objects in the order the user supplied them;
that order is carried through to the file labels in the output column.
"""

__all__ = [
    "read_upload_files",
    "parse_upload_payload",
    "PAYLOAD_SCHEMA",
]

logger = logging.getLogger(__name__)

# Tried in order; latin-1 decodes any byte sequence so it is the last resort
ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")

PAYLOAD_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "filename": {"type": "string", "minLength": 1},
            "contents": {"type": "string"},
        },
        "required": ["filename", "contents"],
    },
}


def _decode(raw: bytes, path: Path) -> str:
    for enc in ENCODINGS:
        try:
            text = raw.decode(enc)
        except UnicodeDecodeError:
            continue
        if enc != ENCODINGS[0]:
            logger.warning(f"{path.name}: not UTF-8, decoded as {enc}")
        return text
    raise UploadError(f"cannot decode uploaded file {path.name}")  # pragma: no cover


def read_upload_files(paths: Iterable[Path]) -> list[UploadedFile]:
    """Read CSV files from disk; the file name becomes the file label."""
    uploads: list[UploadedFile] = []
    for p in paths:
        path = Path(p)
        if not path.is_file():
            raise UploadError(f"uploaded file not found: {path}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise UploadError(f"cannot read uploaded file {path}: {e}") from e
        uploads.append(UploadedFile(filename=path.name, contents=_decode(raw, path)))
    return uploads


def parse_upload_payload(data: str | bytes | list[Any]) -> list[UploadedFile]:
    """Parse the request payload ``[{"filename": ..., "contents": ...}, ...]``.

    ``data`` may be JSON text or an already decoded list. Extra keys on each
    item are ignored.
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise UploadError(f"invalid upload payload: {e}") from e
    try:
        jsonschema.validate(data, PAYLOAD_SCHEMA)
    except ValidationError as e:
        raise UploadError(f"invalid upload payload: {e.message}") from e
    return [UploadedFile(filename=item["filename"], contents=item["contents"]) for item in data]
