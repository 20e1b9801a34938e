"""Export workflow: load, reconstruct, diff and render."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .app_config import ExportConfig
from .columns import LocaleColumns
from .csv_io import ensure_directory
from .diff_service import canonical_keys, diff, is_journal_generated
from .loader import load_translation_map
from .model import ExportResult
from .parser import get_parser
from .report import write_export, write_journal, write_metadata
from .snapshot import read_snapshot

logger = logging.getLogger(__name__)


def log_options(cfg: ExportConfig) -> None:
    logger.info("Exporting translations using the following options:")
    for name, value in cfg.describe().items():
        logger.info("  %s: %s", name, value)


def run_export(cfg: ExportConfig, *, now: datetime | None = None) -> ExportResult:
    """Run one export and return the paths written.

    The previous export is read before the new one overwrites it. The
    journal is written only when a reportable change exists.
    """
    started = now or datetime.now()
    log_options(cfg)

    key_column = cfg.translation_key_column_name
    current = load_translation_map(
        Path(cfg.input_dir),
        cfg.input_file,
        get_parser(cfg.parser_adapter),
        encoding=cfg.encoding,
    )
    columns = LocaleColumns(
        cfg.locale_column_names, locales=current, key_column=key_column
    )

    ensure_directory(Path(cfg.output_dir))
    previous = read_snapshot(
        cfg.output_path,
        key_column=key_column,
        columns=columns,
        encoding=cfg.encoding,
    )

    write_export(
        cfg.output_path,
        current,
        canonical_keys(current),
        key_column=key_column,
        columns=columns,
        encoding=cfg.encoding,
    )

    result = None
    journal_path = None
    if previous is not None:
        result = diff(previous, current)
        logger.info(
            "Changes since last export: %d new, %d updated, %d deleted",
            len(result.inserted),
            len(result.updated),
            len(result.deleted),
        )
        if is_journal_generated(result, show_deleted=cfg.show_deleted_in_journal):
            logger.warning(
                "Translations were updated since last export, generating the journal"
            )
            journal_path = cfg.journal_path(started)
            write_journal(
                journal_path,
                current,
                previous,
                result,
                key_column=key_column,
                columns=columns,
                show_deleted=cfg.show_deleted_in_journal,
                show_old_value=cfg.show_old_value_in_journal,
                encoding=cfg.encoding,
            )

    write_metadata(cfg.metadata_path, current, encoding=cfg.encoding)
    logger.info("Successfully exported translations.")
    return ExportResult(
        export_path=cfg.output_path,
        metadata_path=cfg.metadata_path,
        journal_path=journal_path,
        diff=result,
    )
