from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

from ..models.upload import UploadedFile

"""Progress display with tqdm (TTY only).

A single tqdm bar counts uploaded files as they are indexed. In non-TTY
environments (CI, pipes) the bar is disabled to avoid ANSI control sequences
in the output.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker for indexing uploaded files."""

    def __init__(self, total_files: int, *, description: str = "Indexing files") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0

        # Create tqdm instance only if TTY is enabled
        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_file(self, label: str) -> None:
        self.current_file += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({label})")

    def finish_file(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def track(self, uploads: Iterable[UploadedFile]) -> Iterator[UploadedFile]:
        """Yield uploads unchanged, advancing the bar as each one is consumed.

        The bar advances when the consumer asks for the next upload, i.e. once
        the previous file has been fully indexed.
        """
        for upload in uploads:
            self.start_file(upload.label)
            yield upload
            self.finish_file()

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
