from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.upload import UploadedFile
from .indexer import index_csv

"""Join builder: merge per-file key hits into one key index."""

__all__ = [
    "KeyIndex",
    "build_key_index",
]

logger = logging.getLogger(__name__)

# key value -> file labels, upload order then row order
KeyIndex = dict[str, list[str]]


def build_key_index(uploads: Iterable[UploadedFile], column_name: str) -> KeyIndex:
    """Index every upload on ``column_name`` and merge the results.

    Files are processed in the order given. A key found twice in one file gets
    that file's label twice. The first MissingColumnError aborts the whole join
    and propagates unchanged; no partial index is returned.
    """
    key_index: KeyIndex = {}
    for upload in uploads:
        hits = index_csv(upload.contents, column_name, upload.label)
        absent = 0
        for hit in hits:
            if hit.key is None:
                absent += 1
                continue
            if hit.key not in key_index:
                key_index[hit.key] = []
            key_index[hit.key].append(upload.label)
        logger.debug(f"indexed {upload.label}: rows={len(hits)} absent_keys={absent}")
    return key_index
