from __future__ import annotations

import re

_WORD_RE = re.compile(r"[\w'’-]*\w[\w'’-]*")


def word_count(text: str | None) -> int:
    """Count runs of word characters, apostrophes and hyphens in *text*."""
    if not text:
        return 0
    return len(_WORD_RE.findall(text))
