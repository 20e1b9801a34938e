"""Test module for translation source parsing and flattening."""

from __future__ import annotations

import pytest

from i18n_export_py.core.errors import MalformedTranslationSourceError
from i18n_export_py.core.parser import EmbeddedJsonParser, flatten, get_parser


def test_parse_strips_surrounding_module_text() -> None:
    """Verify text before the first brace and after the last is ignored."""
    raw = 'export default {\n  "a": {"b": "x", "c": "y"}\n};\n'
    assert EmbeddedJsonParser().parse(raw) == {"a.b": "x", "a.c": "y"}


@pytest.mark.parametrize(
    "raw",
    [
        "export default nothing;",
        "}{",
        "export default { a: 'unquoted' };",
        'export default {"a": "x",};',
    ],
)
def test_parse_rejects_malformed_sources(raw: str) -> None:
    """Verify missing braces and invalid object syntax are fatal."""
    with pytest.raises(MalformedTranslationSourceError):
        EmbeddedJsonParser().parse(raw)


def test_flatten_follows_dotted_convention() -> None:
    """Verify arrays, empty containers, nulls and scalars flatten predictably."""
    tree = {
        "menu": {"items": ["Open", "Close"], "empty": {}},
        "count": 3,
        "flag": True,
        "missing": None,
    }
    assert flatten(tree) == {
        "menu.items.0": "Open",
        "menu.items.1": "Close",
        "menu.empty": "",
        "count": "3",
        "flag": "true",
        "missing": None,
    }


def test_flatten_preserves_declaration_order() -> None:
    """Verify flattened keys keep the source order."""
    assert list(flatten({"z": "1", "a": {"y": "2", "b": "3"}})) == ["z", "a.y", "a.b"]


def test_get_parser_rejects_unknown_adapter() -> None:
    """Verify only registered adapters resolve."""
    assert isinstance(get_parser("embedded_json"), EmbeddedJsonParser)
    with pytest.raises(ValueError, match="Unknown parser adapter"):
        get_parser("yaml")


@pytest.mark.parametrize(
    "raw",
    [
        'export default {"": "blank"};',
        'export default {"a": "x", "": null};',
    ],
)
def test_parse_rejects_empty_top_level_key(raw: str) -> None:
    """Verify a key that would flatten to an empty row key is fatal."""
    with pytest.raises(MalformedTranslationSourceError, match="empty translation key"):
        EmbeddedJsonParser().parse(raw)
