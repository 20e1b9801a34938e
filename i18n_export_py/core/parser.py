from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Protocol

from .errors import MalformedTranslationSourceError
from .model import LocaleDict

KEY_DELIMITER = "."


class TranslationSourceParser(Protocol):
    def parse(self, raw: str) -> LocaleDict: ...


# ── flattening ────────────────────────────────────────────────────────────────
def _scalar(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def flatten(tree: dict[str, Any], *, delimiter: str = KEY_DELIMITER) -> LocaleDict:
    """Flatten nested objects/arrays into `a.b.0`-style keys.

    Empty containers keep their key with an empty value; `null` keeps its
    key with no value.
    """
    out: LocaleDict = {}

    def _walk(node: Any, prefix: str) -> None:
        if isinstance(node, dict):
            items = [(str(k), v) for k, v in node.items()]
        elif isinstance(node, list):
            items = [(str(i), v) for i, v in enumerate(node)]
        else:
            out[prefix] = _scalar(node)
            return
        if not items and prefix:
            out[prefix] = ""
            return
        for key, value in items:
            _walk(value, f"{prefix}{delimiter}{key}" if prefix else key)

    _walk(tree, "")
    return out


# ── adapters ──────────────────────────────────────────────────────────────────
class EmbeddedJsonParser:
    """Parse the object literal between the first `{` and the last `}`.

    Leading text such as `export default` and a trailing `;` are ignored.
    """

    def parse(self, raw: str) -> LocaleDict:
        start = raw.find("{")
        end = raw.rfind("}")
        if start < 0 or end < 0 or end < start:
            raise MalformedTranslationSourceError("no embedded object found")
        try:
            payload = json.loads(raw[start : end + 1])
        except json.JSONDecodeError as exc:
            raise MalformedTranslationSourceError(
                f"invalid object syntax: {exc}", original=exc
            ) from exc
        values = flatten(payload)
        if "" in values:
            raise MalformedTranslationSourceError("empty translation key")
        return values


_ADAPTERS: dict[str, Callable[[], TranslationSourceParser]] = {
    "embedded_json": EmbeddedJsonParser,
}


def available_adapters() -> tuple[str, ...]:
    return tuple(sorted(_ADAPTERS))


def get_parser(name: str) -> TranslationSourceParser:
    """Return a parser instance for a configured adapter name."""
    try:
        factory = _ADAPTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown parser adapter {name!r}; expected one of {available_adapters()}"
        ) from None
    return factory()
