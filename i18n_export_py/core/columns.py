"""Locale <-> display column name registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .errors import ColumnConflictError

logger = logging.getLogger(__name__)

OLD_VALUE_SUFFIX = "_OLD"
UPDATE_TYPE_COLUMN = "UPDATE_TYPE"


class LocaleColumns:
    """Bidirectional mapping built once from the configured overrides.

    Display names are upper-cased. A locale without an override is shown
    as its upper-cased identifier. Known *locales* read back from their
    display name exactly; a column nothing matches reads back lower-cased.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        *,
        locales: Iterable[str] = (),
        key_column: str | None = None,
    ) -> None:
        pairs = overrides.items() if isinstance(overrides, Mapping) else overrides
        self._by_locale: dict[str, str] = {}
        self._by_column: dict[str, str] = {}
        for locale, column in pairs:
            self._by_locale[locale] = column.upper()
        known = tuple(locales)
        # locales being exported take precedence over overrides for absent ones
        for locale in known:
            self._by_column[self.column_for(locale)] = locale
        for locale, column in self._by_locale.items():
            self._by_column.setdefault(column, locale)
        self._check_conflicts(known, key_column)

    def _check_conflicts(self, locales: tuple[str, ...], key_column: str | None) -> None:
        owners: dict[str, list[str]] = {}
        if key_column is not None:
            owners[key_column] = ["the translation key"]
        owners.setdefault(UPDATE_TYPE_COLUMN, []).append("the journal update type")
        for locale in locales:
            owners.setdefault(self.column_for(locale), []).append(f"locale {locale!r}")
            owners.setdefault(self.old_column_for(locale), []).append(
                f"the old values of locale {locale!r}"
            )
        for column, claimed_by in owners.items():
            if len(claimed_by) > 1:
                raise ColumnConflictError(column=column, owners=tuple(claimed_by))

    def column_for(self, locale: str) -> str:
        column = self._by_locale.get(locale)
        if column is None:
            logger.debug("No column override for locale %r", locale)
            return locale.upper()
        return column

    def locale_for(self, column: str) -> str:
        locale = self._by_column.get(column.upper())
        if locale is None:
            return column.lower()
        return locale

    def old_column_for(self, locale: str) -> str:
        return self.column_for(locale) + OLD_VALUE_SUFFIX

    def __repr__(self) -> str:
        return f"LocaleColumns({self._by_locale!r})"
