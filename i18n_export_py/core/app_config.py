"""Export configuration loading from defaults, `config/app.toml` and CLI overrides."""

from __future__ import annotations

import importlib
import json
from dataclasses import dataclass, fields, replace
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import Any

from .parser import available_adapters

tomllib: ModuleType | None
try:  # Python 3.11+
    tomllib = importlib.import_module("tomllib")
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None

TIMESTAMP_PLACEHOLDER = "{timestamp}"


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Store effective export paths, column naming and journal toggles."""

    input_dir: str = "app/locales"
    input_file: str = "translations.js"
    output_dir: str = "i18n-exports"
    output_file: str = "translations.csv"
    journal_file: str = f"translations-updates-{TIMESTAMP_PLACEHOLDER}.csv"
    metadata_file: str = "translations-meta.csv"
    translation_key_column_name: str = "SYSTEM_KEY"
    locale_column_names: tuple[tuple[str, str], ...] = ()
    show_deleted_in_journal: bool = False
    show_old_value_in_journal: bool = False
    parser_adapter: str = "embedded_json"
    encoding: str = "utf-8"
    timestamp_format: str = "%Y%m%d%H%M%S"

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.output_file

    @property
    def metadata_path(self) -> Path:
        return Path(self.output_dir) / self.metadata_file

    def journal_path(self, now: datetime) -> Path:
        """Return the journal path, stamping `{timestamp}` with *now*."""
        name = self.journal_file.replace(
            TIMESTAMP_PLACEHOLDER, now.strftime(self.timestamp_format)
        )
        return Path(self.output_dir) / name

    def describe(self) -> dict[str, object]:
        """Return option values in declaration order for logging."""
        out: dict[str, object] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if field.name == "locale_column_names":
                value = json.dumps(dict(value))
            out[field.name] = value
        return out


_STR_FIELDS = (
    "input_dir",
    "input_file",
    "output_dir",
    "output_file",
    "journal_file",
    "metadata_file",
    "translation_key_column_name",
    "parser_adapter",
    "encoding",
    "timestamp_format",
)
_BOOL_FIELDS = ("show_deleted_in_journal", "show_old_value_in_journal")


def _candidate_roots(root: Path | None) -> list[Path]:
    roots = [Path.cwd()]
    if root is not None:
        roots.append(root)
    seen: set[Path] = set()
    out: list[Path] = []
    for entry in roots:
        entry = entry.resolve()
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return out


def _load_toml(path: Path) -> dict[str, Any]:
    if tomllib is None or not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except OSError:
        return {}


def normalize_column_names(value: Any) -> tuple[tuple[str, str], ...]:
    """Return locale -> column pairs, dropping blank or non-string entries."""
    if not isinstance(value, dict):
        return ()
    out: list[tuple[str, str]] = []
    for raw_locale, raw_column in value.items():
        if not isinstance(raw_column, str):
            continue
        locale = str(raw_locale).strip()
        column = raw_column.strip()
        if not locale or not column:
            continue
        out.append((locale, column))
    return tuple(out)


def parse_column_names(raw: str) -> tuple[tuple[str, str], ...]:
    """Parse a JSON object of locale -> column name overrides."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid locale column names JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Locale column names must be a JSON object.")
    return normalize_column_names(payload)


def _merge_section(cfg: ExportConfig, section: dict[str, Any]) -> ExportConfig:
    changes: dict[str, Any] = {}
    for name in _STR_FIELDS:
        value = section.get(name)
        if isinstance(value, str) and value.strip():
            changes[name] = value.strip()
    for name in _BOOL_FIELDS:
        value = section.get(name)
        if isinstance(value, bool):
            changes[name] = value
    if "locale_column_names" in section:
        columns = normalize_column_names(section["locale_column_names"])
        if columns or section["locale_column_names"] == {}:
            changes["locale_column_names"] = columns
    return normalize(replace(cfg, **changes)) if changes else cfg


def normalize(cfg: ExportConfig) -> ExportConfig:
    """Apply invariants every config layer must satisfy."""
    key_column = cfg.translation_key_column_name.strip().upper()
    if key_column == cfg.translation_key_column_name:
        return cfg
    return replace(cfg, translation_key_column_name=key_column)


@lru_cache(maxsize=8)
def load(root: Path | None = None, path: Path | None = None) -> ExportConfig:
    """Load export configuration from `config/app.toml` candidates or *path*."""
    if path is not None and not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    cfg = ExportConfig()
    paths = (
        [path]
        if path is not None
        else [base / "config" / "app.toml" for base in _candidate_roots(root)]
    )
    for candidate in paths:
        data = _load_toml(candidate)
        section = data.get("export", {})
        if isinstance(section, dict):
            cfg = _merge_section(cfg, section)
    return cfg


def with_overrides(cfg: ExportConfig, **overrides: Any) -> ExportConfig:
    """Return *cfg* with non-None overrides applied."""
    changes = {name: value for name, value in overrides.items() if value is not None}
    if not changes:
        return cfg
    return normalize(replace(cfg, **changes))


def validate(cfg: ExportConfig) -> ExportConfig:
    """Reject settings that would only fail once the export is running."""
    if cfg.parser_adapter not in available_adapters():
        raise ValueError(
            f"Unknown parser adapter {cfg.parser_adapter!r}; "
            f"expected one of {available_adapters()}"
        )
    return cfg
