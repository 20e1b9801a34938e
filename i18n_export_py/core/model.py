from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LocaleDict = dict[str, str | None]
TranslationMap = dict[str, LocaleDict]
ReadOnlyTranslationMap = Mapping[str, Mapping[str, str | None]]


class UpdateType(str, enum.Enum):
    INSERT = "NEW"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Keys classified between a previous and a current snapshot."""

    inserted: tuple[str, ...]
    updated: tuple[str, ...]
    deleted: tuple[str, ...]

    def has_changes(self, *, include_deleted: bool = True) -> bool:
        if self.inserted or self.updated:
            return True
        return include_deleted and bool(self.deleted)


@dataclass(frozen=True, slots=True)
class LocaleStats:
    locale: str
    key_count: int
    word_count: int


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Paths written by one export run."""

    export_path: Path
    metadata_path: Path
    journal_path: Path | None
    diff: DiffResult | None
