"""Tagged field values carried by localized field descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Flag:
    value: bool


@dataclass(frozen=True, slots=True)
class Missing:
    pass


@dataclass(frozen=True, slots=True)
class TextList:
    values: tuple[str, ...]


FieldValue = Union[Text, Flag, Missing, TextList]
JsonFieldValue = Union[str, bool, None, list[str]]

MISSING = Missing()


def text_value(raw: object) -> FieldValue:
    """Wrap a raw record value as text; absent values become an empty string."""

    if raw is None:
        return Text("")
    if isinstance(raw, bool):
        return Flag(raw)
    return Text(raw if isinstance(raw, str) else str(raw))


def nullable_value(raw: object) -> FieldValue:
    """Like `text_value` but keeps an absent value as `Missing`."""

    if raw is None:
        return MISSING
    return text_value(raw)


def flag_value(raw: object) -> FieldValue:
    return Flag(bool(raw))


def text_list_value(raw: object) -> FieldValue:
    if not isinstance(raw, (list, tuple)):
        return TextList(())
    return TextList(tuple(str(item) for item in raw if item is not None))


def to_json_value(value: FieldValue) -> JsonFieldValue:
    """Serialize a tagged field value to its JSON representation."""

    if isinstance(value, Text):
        return value.value
    if isinstance(value, Flag):
        return value.value
    if isinstance(value, Missing):
        return None
    if isinstance(value, TextList):
        return list(value.values)
    raise TypeError(f"Unsupported field value: {value!r}")
