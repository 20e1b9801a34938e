"""Rebuild the previous translation map from a written consolidated export."""

from __future__ import annotations

import logging
from pathlib import Path

from .columns import LocaleColumns
from .csv_io import RowReader
from .errors import MalformedSnapshotError
from .model import TranslationMap

logger = logging.getLogger(__name__)


def resolve_locales(
    headers: tuple[str, ...],
    *,
    key_column: str,
    columns: LocaleColumns,
) -> dict[str, str]:
    """Map every non-key header to its locale, as {locale: column}."""
    if key_column not in headers:
        raise ValueError(key_column)
    locales: dict[str, str] = {}
    for header in headers:
        if header == key_column:
            continue
        locales.setdefault(columns.locale_for(header), header)
    return locales


def read_snapshot(
    path: Path,
    *,
    key_column: str,
    columns: LocaleColumns,
    encoding: str = "utf-8",
) -> TranslationMap | None:
    """Return the map recorded in *path*, or None when no prior export exists.

    Rows without a key value, such as the blank separator rows, are skipped.
    """
    if not path.is_file():
        logger.info("No previous export at %s, skipping journal", path)
        return None

    logger.info("Reading previous export: %s", path)
    with RowReader(path, encoding=encoding) as reader:
        try:
            locales = resolve_locales(
                reader.headers, key_column=key_column, columns=columns
            )
        except ValueError:
            raise MalformedSnapshotError(path=path, column=key_column) from None

        previous: TranslationMap = {locale: {} for locale in locales}
        for row in reader.rows():
            key = row.get(key_column, "")
            if not key:
                continue
            for locale, column in locales.items():
                previous[locale][key] = row.get(column, "")
    return previous
