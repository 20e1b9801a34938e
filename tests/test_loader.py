"""Test module for translation map loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from i18n_export_py.core.errors import MalformedTranslationSourceError
from i18n_export_py.core.loader import load_translation_map
from i18n_export_py.core.parser import EmbeddedJsonParser


def test_load_translation_map_flattens_each_locale(locale_tree) -> None:
    """Verify every locale directory yields a flat dict, empty when file is missing."""
    root = locale_tree(
        {
            "en": {"home": {"title": "Home"}},
            "fr": {"home": {"title": "Accueil"}},
            "de": None,
        }
    )
    result = load_translation_map(root, "translations.js", EmbeddedJsonParser())
    assert result == {
        "de": {},
        "en": {"home.title": "Home"},
        "fr": {"home.title": "Accueil"},
    }


def test_load_translation_map_reports_offending_path(tmp_path: Path) -> None:
    """Verify a malformed locale file aborts the load with its path."""
    bad = tmp_path / "locales" / "en"
    bad.mkdir(parents=True)
    (bad / "translations.js").write_text("export default 42;", encoding="utf-8")
    with pytest.raises(MalformedTranslationSourceError) as excinfo:
        load_translation_map(tmp_path / "locales", "translations.js", EmbeddedJsonParser())
    assert excinfo.value.path == bad / "translations.js"
    assert "translations.js" in str(excinfo.value)
