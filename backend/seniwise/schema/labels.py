"""Localized label lookup with positional template interpolation."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from seniwise.schema.labels_en_us import LABELS_EN_US

# `\$` is a literal dollar sign, `$<digits>` selects a 1-based positional value.
_TEMPLATE_TOKEN = re.compile(r"\\\$|\$(\d+)")


def invalid_key_placeholder(key: object) -> str:
    """Return the visible marker rendered in place of an unknown label key."""

    return f'INVALID_KEY("{key}")'


def interpolate(template: str, values: Sequence[object] = ()) -> str:
    """Expand `$N` placeholders and `\\$` escapes in a label template."""

    def _replace(match: re.Match[str]) -> str:
        digits = match.group(1)
        if digits is None:
            return "$"
        index = int(digits) - 1
        if 0 <= index < len(values):
            value = values[index]
            return "" if value is None else str(value)
        return ""

    return _TEMPLATE_TOKEN.sub(_replace, template)


class LabelResolver:
    """Resolve label keys against one locale's label table."""

    def __init__(self, table: Mapping[str, str], *, locale: str) -> None:
        self.locale = locale
        self._table = MappingProxyType(dict(table))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and isinstance(self._table.get(key), str)

    def resolve(self, key: str, *values: object) -> str:
        """Resolve `key`, interpolating `values`; unknown keys yield a tagged placeholder."""

        if not isinstance(key, str) or not key:
            return invalid_key_placeholder(key)
        template = self._table.get(key)
        if not isinstance(template, str):
            return invalid_key_placeholder(key)
        return interpolate(template, values)

    def resolve_or(self, key: str | None, fallback: str, *values: object) -> str:
        """Resolve `key` or return `fallback` when the key is missing or resolves empty."""

        if not key or key not in self:
            return fallback
        return self.resolve(key, *values) or fallback


class LabelCatalog:
    """Label tables keyed by locale."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]], *, default_locale: str) -> None:
        if default_locale not in tables:
            raise KeyError(f"Default locale {default_locale!r} has no label table")
        self.default_locale = default_locale
        self._tables = {locale: MappingProxyType(dict(table)) for locale, table in tables.items()}

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(self._tables))

    def resolver(self, locale: str | None = None) -> LabelResolver:
        """Return a resolver for `locale`, falling back to the default locale."""

        chosen = locale if locale in self._tables else self.default_locale
        return LabelResolver(self._tables[chosen], locale=chosen)


def default_label_catalog(default_locale: str = "en_us") -> LabelCatalog:
    """Build the catalog of label tables shipped with the application."""

    return LabelCatalog({"en_us": LABELS_EN_US}, default_locale=default_locale)
