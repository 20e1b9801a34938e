from __future__ import annotations

import pytest

from i18n_export_py.core.word_count import word_count


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, 0),
        ("", 0),
        ("bonjour", 1),
        ("Hello, world!", 2),
        ("l'été est chaud", 3),
        ("state-of-the-art  design", 2),
        ("a - b", 2),
        ("Click {{count}} items", 3),
    ],
)
def test_word_count(text: str | None, expected: int) -> None:
    assert word_count(text) == expected
