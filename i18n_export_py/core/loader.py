"""Build the current translation map from a locale directory tree."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import MalformedTranslationSourceError
from .model import TranslationMap
from .parser import TranslationSourceParser
from .project_scanner import scan_root

logger = logging.getLogger(__name__)


def load_translation_map(
    input_dir: Path,
    input_file: str,
    parser: TranslationSourceParser,
    *,
    encoding: str = "utf-8",
) -> TranslationMap:
    """Return {locale: {flat_key: value}} for every locale under *input_dir*.

    A locale directory without *input_file* maps to an empty dict. Any
    malformed source aborts the whole load.
    """
    translation_map: TranslationMap = {}
    for locale, locale_dir in scan_root(input_dir).items():
        path = locale_dir / input_file
        if not path.is_file():
            logger.info("No translation file for locale %s at %s", locale, path)
            translation_map[locale] = {}
            continue
        logger.info("Getting translations from: %s", path)
        raw = path.read_text(encoding=encoding)
        try:
            translation_map[locale] = parser.parse(raw)
        except MalformedTranslationSourceError as exc:
            raise exc.with_path(path) from exc
    return translation_map
