"""Classify translation keys between a previous and a current snapshot."""

from __future__ import annotations

from collections.abc import Mapping

from .fingerprint import locale_digest
from .model import DiffResult, ReadOnlyTranslationMap


def canonical_keys(translation_map: ReadOnlyTranslationMap) -> tuple[str, ...]:
    """Return keys in first-seen order across locales, then keys per locale."""
    seen: dict[str, None] = {}
    for values in translation_map.values():
        for key in values:
            seen.setdefault(key, None)
    return tuple(seen)


def _changed_in_locale(
    old_values: Mapping[str, str | None],
    new_values: Mapping[str, str | None],
) -> set[str]:
    # An empty or missing old value never counts as an update.
    return {
        key
        for key, old in old_values.items()
        if old and old != new_values.get(key)
    }


def updated_keys(
    previous: ReadOnlyTranslationMap,
    current: ReadOnlyTranslationMap,
    *,
    candidates: tuple[str, ...],
) -> tuple[str, ...]:
    """Return candidates whose non-empty old value changed in a shared locale."""
    changed: set[str] = set()
    for locale, old_values in previous.items():
        new_values = current.get(locale)
        if new_values is None:
            continue
        if locale_digest(old_values) == locale_digest(new_values):
            continue
        changed |= _changed_in_locale(old_values, new_values)
    return tuple(key for key in candidates if key in changed)


def diff(
    previous: ReadOnlyTranslationMap,
    current: ReadOnlyTranslationMap,
) -> DiffResult:
    """Classify every key as inserted, updated, deleted or unchanged.

    Inserted and updated keys follow the current canonical order, deleted
    keys the previous one.
    """
    old_keys = canonical_keys(previous)
    new_keys = canonical_keys(current)
    old_set = set(old_keys)
    new_set = set(new_keys)
    inserted = tuple(key for key in new_keys if key not in old_set)
    deleted = tuple(key for key in old_keys if key not in new_set)
    persisted = tuple(key for key in new_keys if key in old_set)
    return DiffResult(
        inserted=inserted,
        updated=updated_keys(previous, current, candidates=persisted),
        deleted=deleted,
    )


def is_journal_generated(result: DiffResult, *, show_deleted: bool) -> bool:
    """Return whether the diff holds a change the journal would report."""
    return result.has_changes(include_deleted=show_deleted)
