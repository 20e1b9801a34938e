"""CLI entry-point for i18n-export-py."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from i18n_export_py import __version__
from i18n_export_py.core import app_config
from i18n_export_py.core.errors import ExportError
from i18n_export_py.core.export_workflow import run_export

logger = logging.getLogger("i18n_export_py")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-export-py",
        description=(
            "Export per-locale translation files to a consolidated CSV, a metadata "
            "summary and a journal of changes since the last export."
        ),
    )
    parser.add_argument("--input-dir", help="locale directory (default: app/locales)")
    parser.add_argument(
        "--input-file", help="translation file in each locale (default: translations.js)"
    )
    parser.add_argument("--output-dir", help="output directory (default: i18n-exports)")
    parser.add_argument(
        "--output-file", help="consolidated CSV file (default: translations.csv)"
    )
    parser.add_argument(
        "--metadata-file",
        help="per-locale statistics CSV file (default: translations-meta.csv)",
    )
    parser.add_argument(
        "--journal-file",
        help="journal CSV file (default: translations-updates-{timestamp}.csv)",
    )
    parser.add_argument(
        "--show-deleted-in-journal",
        action="store_true",
        default=None,
        help="include deleted translations in the journal",
    )
    parser.add_argument(
        "--show-old-value-in-journal",
        action="store_true",
        default=None,
        help="include previous values as <COLUMN>_OLD columns in the journal",
    )
    parser.add_argument(
        "--translation-key-column-name",
        help="column name for the translation key (default: SYSTEM_KEY)",
    )
    parser.add_argument(
        "--locale-column-names",
        help='JSON object of column names per locale, e.g. \'{"en": "EN", "fr": "FR"}\'',
    )
    parser.add_argument("--config", type=Path, help="explicit TOML config file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging level (default: INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=_LOG_FORMAT)

    try:
        cfg = app_config.load(path=args.config)
        columns = (
            app_config.parse_column_names(args.locale_column_names)
            if args.locale_column_names is not None
            else None
        )
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
    cfg = app_config.with_overrides(
        cfg,
        input_dir=args.input_dir,
        input_file=args.input_file,
        output_dir=args.output_dir,
        output_file=args.output_file,
        metadata_file=args.metadata_file,
        journal_file=args.journal_file,
        show_deleted_in_journal=args.show_deleted_in_journal,
        show_old_value_in_journal=args.show_old_value_in_journal,
        translation_key_column_name=args.translation_key_column_name,
        locale_column_names=columns,
    )
    try:
        app_config.validate(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        run_export(cfg)
    except ExportError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
