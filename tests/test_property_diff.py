from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from i18n_export_py.core.diff_service import canonical_keys, diff

_keys = st.sampled_from(["a", "b", "c", "d", "e.f", "g.h.i"])
_values = st.one_of(st.none(), st.sampled_from(["", "hi", "hello", "salut"]))
_locale_dicts = st.dictionaries(_keys, _values, max_size=6)
_maps = st.dictionaries(st.sampled_from(["en", "fr", "de"]), _locale_dicts, max_size=3)


@given(previous=_maps, current=_maps)
@settings(max_examples=150, deadline=None)
def test_property_every_key_has_at_most_one_class(previous, current) -> None:
    """Inserted, updated and deleted are disjoint and cover only known keys."""
    result = diff(previous, current)
    inserted, updated, deleted = map(set, (result.inserted, result.updated, result.deleted))
    assert not inserted & updated
    assert not inserted & deleted
    assert not updated & deleted

    old_keys = set(canonical_keys(previous))
    new_keys = set(canonical_keys(current))
    assert inserted == new_keys - old_keys
    assert deleted == old_keys - new_keys
    assert updated <= old_keys & new_keys
    assert len(result.updated) == len(updated)


@given(previous=_maps, current=_maps)
@settings(max_examples=150, deadline=None)
def test_property_updated_matches_reference_definition(previous, current) -> None:
    """Updated keys are exactly those with a truthy, changed old value."""
    persisted = set(canonical_keys(previous)) & set(canonical_keys(current))
    expected = {
        key
        for locale, old_values in previous.items()
        if locale in current
        for key, old in old_values.items()
        if key in persisted and old and old != current[locale].get(key)
    }
    assert set(diff(previous, current).updated) == expected


@given(translation_map=_maps)
@settings(max_examples=80, deadline=None)
def test_property_canonical_keys_stable_and_unique(translation_map) -> None:
    first = canonical_keys(translation_map)
    assert first == canonical_keys(translation_map)
    assert len(first) == len(set(first))


@given(translation_map=_maps)
@settings(max_examples=80, deadline=None)
def test_property_self_diff_is_empty(translation_map) -> None:
    result = diff(translation_map, translation_map)
    assert result.inserted == result.updated == result.deleted == ()
