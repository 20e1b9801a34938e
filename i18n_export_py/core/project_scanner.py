from __future__ import annotations

from pathlib import Path


def scan_root(root: Path) -> dict[str, Path]:
    """Return {'en': Path('…/en'), …} for every locale sub-directory of *root*."""
    if not root.is_dir():
        raise NotADirectoryError(root)

    locales: dict[str, Path] = {}
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            locales[child.name] = child.resolve()
    return locales
