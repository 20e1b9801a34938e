"""xxhash digests of locale dictionaries for fast unchanged-locale detection."""

from __future__ import annotations

from collections.abc import Mapping

import xxhash

_NONE_MARK = b"\x00"
_VALUE_MARK = b"\x01"
_SEP = b"\x1f"


def locale_digest(values: Mapping[str, str | None]) -> int:
    """Return an order-independent xxh64 digest of key/value pairs.

    `None` and `""` hash differently.
    """
    hasher = xxhash.xxh64()
    for key in sorted(values):
        value = values[key]
        hasher.update(key.encode("utf-8", errors="replace"))
        hasher.update(_SEP)
        if value is None:
            hasher.update(_NONE_MARK)
        else:
            hasher.update(_VALUE_MARK)
            hasher.update(value.encode("utf-8", errors="replace"))
        hasher.update(_SEP)
    return int(hasher.intdigest())
