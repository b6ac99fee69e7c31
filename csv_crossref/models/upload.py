from __future__ import annotations

from dataclasses import dataclass

"""UploadedFile model: one user-selected CSV file.

Mirrors the request payload shape ``{"filename": ..., "contents": ...}``.
"""

__all__ = [
    "UploadedFile",
]


@dataclass(frozen=True)
class UploadedFile:
    filename: str  # File label recorded against every key found in the file
    contents: str  # Raw CSV text

    @property
    def label(self) -> str:
        return self.filename
