"""i18n-export-py – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    DiffResult,
    ExportConfig,
    ExportError,
    ExportResult,
    UpdateType,
    canonical_keys,
    diff,
    run_export,
    scan_root,
)

try:
    __version__ = metadata.version("i18n-export-py")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
