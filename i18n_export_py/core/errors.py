"""Fatal export errors."""

from __future__ import annotations

from pathlib import Path


class ExportError(Exception):
    """Base class for errors that abort an export run."""


class MalformedTranslationSourceError(ExportError):
    """Represent a translation file without a parseable embedded object."""

    def __init__(
        self,
        reason: str,
        *,
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}Unable to parse the translations ({reason}).")
        self.reason = reason
        self.path = path
        self.original = original

    def with_path(self, path: Path) -> MalformedTranslationSourceError:
        return MalformedTranslationSourceError(
            self.reason, path=path, original=self.original
        )


class MalformedSnapshotError(ExportError):
    """Represent a previous export that lacks the translation key column."""

    def __init__(self, *, path: Path, column: str) -> None:
        super().__init__(
            f"{path}: malformed snapshot, missing key column {column!r}."
        )
        self.path = path
        self.column = column


class ColumnConflictError(ExportError):
    """Represent two locales, or a locale and a fixed column, sharing a header."""

    def __init__(self, *, column: str, owners: tuple[str, ...]) -> None:
        super().__init__(
            f"Column {column!r} is claimed by {', '.join(owners)}; "
            "adjust the locale column names."
        )
        self.column = column
        self.owners = owners
