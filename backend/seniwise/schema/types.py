"""Static declarations describing resident fields and visit actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

InputKind = Literal["text", "textarea"]
ValueKind = Literal["boolean", "text"]


@dataclass(frozen=True, slots=True)
class LookupOption:
    value: str
    label_key: str


@dataclass(frozen=True, slots=True)
class ProfileField:
    """One resident profile attribute and how it is presented."""

    key: str
    label_key: str
    hidden: bool = False
    readonly: bool = False
    nullable: bool = False
    input_kind: InputKind = "text"


@dataclass(frozen=True, slots=True)
class EnumGroup:
    """Health category whose value is one of a fixed set of options."""

    key: str
    label_key: str
    options: tuple[LookupOption, ...]


@dataclass(frozen=True, slots=True)
class FreeTextField:
    key: str
    label_key: str
    notes_key: str
    input_kind: InputKind = "text"


@dataclass(frozen=True, slots=True)
class FlagField:
    key: str
    label_key: str


@dataclass(frozen=True, slots=True)
class VisitAction:
    key: str
    label_key: str
    icon: str
    kind: ValueKind


@dataclass(frozen=True, slots=True)
class VisitGroup:
    key: str
    label_key: str
    icon: str
    actions: tuple[VisitAction, ...]


@dataclass(frozen=True, slots=True)
class VisitCategory:
    key: str
    label_key: str
    icon: str
    actions: tuple[VisitAction, ...] = field(default_factory=tuple)
    groups: tuple[VisitGroup, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class VisitActionMeta:
    """Flattened view of a visit action with its enclosing category/group labels."""

    label_key: str
    kind: ValueKind
    category_label_key: str
    group_label_key: str | None = None
