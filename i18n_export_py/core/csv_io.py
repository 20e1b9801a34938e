"""Delimited row writer/reader primitives used by every report."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import TracebackType
from typing import IO

logger = logging.getLogger(__name__)


def clean_file(path: Path) -> None:
    """Delete *path* if it exists."""
    if path.exists():
        path.unlink()


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class RowWriter:
    """Write dict rows under a fixed header, flushing after every row.

    Any previous file at *path* is removed before the new stream opens.
    """

    def __init__(
        self, path: Path, columns: Sequence[str], *, encoding: str = "utf-8"
    ) -> None:
        self.path = path
        self.columns = tuple(columns)
        self._encoding = encoding
        self._handle: IO[str] | None = None
        self._writer: csv.DictWriter[str] | None = None
        self.rows_written = 0

    def open(self) -> RowWriter:
        clean_file(self.path)
        self._handle = open(self.path, "w", encoding=self._encoding, newline="")
        self._writer = csv.DictWriter(
            self._handle, fieldnames=self.columns, extrasaction="ignore"
        )
        self._writer.writeheader()
        return self

    def write(self, row: Mapping[str, object]) -> None:
        if self._writer is None or self._handle is None:
            raise RuntimeError(f"Row writer for {self.path} is not open.")
        self._writer.writerow(
            {column: _cell(row.get(column)) for column in self.columns}
        )
        self._handle.flush()
        self.rows_written += 1

    def write_blank(self) -> None:
        self.write({})

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
        self._handle = None
        self._writer = None

    def __enter__(self) -> RowWriter:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _cell(value: object) -> str:
    if value is None:
        return ""
    return str(value)


class RowReader:
    """Read a delimited file in three phases: open, rows, close.

    `headers` is resolved by `open()` so callers can inspect it before the
    first row is consumed.
    """

    def __init__(self, path: Path, *, encoding: str = "utf-8") -> None:
        self.path = path
        self._encoding = encoding
        self._handle: IO[str] | None = None
        self._reader: csv.DictReader[str] | None = None
        self.headers: tuple[str, ...] = ()

    def open(self) -> RowReader:
        self._handle = open(self.path, encoding=self._encoding, newline="")
        self._reader = csv.DictReader(self._handle)
        self.headers = tuple(self._reader.fieldnames or ())
        return self

    def rows(self) -> Iterator[dict[str, str]]:
        if self._reader is None:
            raise RuntimeError(f"Row reader for {self.path} is not open.")
        for row in self._reader:
            yield {key: value or "" for key, value in row.items() if key is not None}

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
        self._handle = None
        self._reader = None

    def __enter__(self) -> RowReader:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
