"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .app_config import ExportConfig
from .diff_service import canonical_keys, diff, is_journal_generated
from .errors import (
    ColumnConflictError,
    ExportError,
    MalformedSnapshotError,
    MalformedTranslationSourceError,
)
from .export_workflow import run_export
from .model import DiffResult, ExportResult, LocaleStats, TranslationMap, UpdateType
from .project_scanner import scan_root

__all__ = [
    "scan_root",
    "canonical_keys",
    "diff",
    "is_journal_generated",
    "run_export",
    "ExportConfig",
    "ExportResult",
    "DiffResult",
    "LocaleStats",
    "TranslationMap",
    "UpdateType",
    "ColumnConflictError",
    "ExportError",
    "MalformedSnapshotError",
    "MalformedTranslationSourceError",
]
