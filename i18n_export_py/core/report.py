"""Render the consolidated export, the change journal and the metadata summary."""

from __future__ import annotations

import logging
from pathlib import Path

from .columns import UPDATE_TYPE_COLUMN, LocaleColumns
from .csv_io import RowWriter
from .model import DiffResult, LocaleStats, ReadOnlyTranslationMap, UpdateType
from .word_count import word_count

logger = logging.getLogger(__name__)

LOCALE_COLUMN = "LOCALE"
KEY_COUNT_COLUMN = "NUMBER_OF_KEYS"
WORD_COUNT_COLUMN = "NUMBER_OF_WORDS"
METADATA_COLUMNS = (LOCALE_COLUMN, KEY_COUNT_COLUMN, WORD_COUNT_COLUMN)


def _value_row(
    key: str,
    translation_map: ReadOnlyTranslationMap,
    *,
    key_column: str,
    columns: LocaleColumns,
) -> dict[str, object]:
    row: dict[str, object] = {key_column: key}
    for locale, values in translation_map.items():
        row[columns.column_for(locale)] = values.get(key)
    return row


def export_columns(
    translation_map: ReadOnlyTranslationMap,
    *,
    key_column: str,
    columns: LocaleColumns,
) -> list[str]:
    return [key_column, *(columns.column_for(locale) for locale in translation_map)]


def write_export(
    path: Path,
    current: ReadOnlyTranslationMap,
    keys: tuple[str, ...],
    *,
    key_column: str,
    columns: LocaleColumns,
    encoding: str = "utf-8",
) -> int:
    """Write one row per key between two blank separator rows."""
    logger.info("Generating translation file: %s", path)
    header = export_columns(current, key_column=key_column, columns=columns)
    with RowWriter(path, header, encoding=encoding) as writer:
        writer.write_blank()
        for key in keys:
            writer.write(
                _value_row(key, current, key_column=key_column, columns=columns)
            )
        writer.write_blank()
        return writer.rows_written


def journal_columns(
    current: ReadOnlyTranslationMap,
    previous: ReadOnlyTranslationMap,
    *,
    key_column: str,
    columns: LocaleColumns,
    show_old_value: bool,
) -> list[str]:
    header = export_columns(current, key_column=key_column, columns=columns)
    if show_old_value:
        header.extend(columns.old_column_for(locale) for locale in previous)
    header.append(UPDATE_TYPE_COLUMN)
    return header


def write_journal(
    path: Path,
    current: ReadOnlyTranslationMap,
    previous: ReadOnlyTranslationMap,
    result: DiffResult,
    *,
    key_column: str,
    columns: LocaleColumns,
    show_deleted: bool = False,
    show_old_value: bool = False,
    encoding: str = "utf-8",
) -> int:
    """Write NEW, then UPDATE, then (optionally) DELETE rows.

    Current values are shown for every current locale; previous values go in
    `<COLUMN>_OLD` columns for every previous locale when *show_old_value*.
    """
    logger.info("Generating journal file: %s", path)
    header = journal_columns(
        current,
        previous,
        key_column=key_column,
        columns=columns,
        show_old_value=show_old_value,
    )
    groups = [(UpdateType.INSERT, result.inserted), (UpdateType.UPDATE, result.updated)]
    if show_deleted:
        groups.append((UpdateType.DELETE, result.deleted))

    with RowWriter(path, header, encoding=encoding) as writer:
        writer.write_blank()
        for update_type, keys in groups:
            for key in keys:
                row = _value_row(key, current, key_column=key_column, columns=columns)
                if show_old_value:
                    for locale, values in previous.items():
                        row[columns.old_column_for(locale)] = values.get(key)
                row[UPDATE_TYPE_COLUMN] = update_type.value
                writer.write(row)
        writer.write_blank()
        return writer.rows_written


def locale_stats(current: ReadOnlyTranslationMap) -> list[LocaleStats]:
    """Return key and word totals per locale."""
    stats: list[LocaleStats] = []
    for locale, values in current.items():
        words = sum(word_count(value) for value in values.values())
        stats.append(LocaleStats(locale=locale, key_count=len(values), word_count=words))
    return stats


def write_metadata(
    path: Path,
    current: ReadOnlyTranslationMap,
    *,
    encoding: str = "utf-8",
) -> list[LocaleStats]:
    logger.info("Generating translation meta data file: %s", path)
    stats = locale_stats(current)
    with RowWriter(path, METADATA_COLUMNS, encoding=encoding) as writer:
        writer.write_blank()
        for entry in stats:
            writer.write(
                {
                    LOCALE_COLUMN: entry.locale,
                    KEY_COUNT_COLUMN: entry.key_count,
                    WORD_COUNT_COLUMN: entry.word_count,
                }
            )
    return stats
