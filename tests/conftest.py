import csv
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from i18n_export_py.core import app_config


@pytest.fixture(autouse=True)
def _clear_config_cache() -> None:
    app_config.load.cache_clear()


def _write_locale_tree(root: Path, locales: dict[str, dict | None]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for locale, tree in locales.items():
        locale_dir = root / locale
        locale_dir.mkdir(exist_ok=True)
        if tree is None:
            continue
        body = json.dumps(tree, ensure_ascii=False, indent=2)
        (locale_dir / "translations.js").write_text(
            f"export default {body};\n", encoding="utf-8"
        )
    return root


@pytest.fixture()
def locale_tree(tmp_path: Path) -> Callable[[dict[str, dict | None]], Path]:
    """Write `<tmp>/locales/<locale>/translations.js` files; None skips the file."""

    def _make(locales: dict[str, dict | None]) -> Path:
        return _write_locale_tree(tmp_path / "locales", locales)

    return _make


@pytest.fixture()
def read_csv() -> Callable[[Path], list[dict[str, str]]]:
    def _read(path: Path) -> list[dict[str, str]]:
        with open(path, encoding="utf-8", newline="") as handle:
            return list(csv.DictReader(handle))

    return _read
