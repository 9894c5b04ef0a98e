"""Immutable registry of resident field and visit action declarations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from seniwise.schema.health_fields import (
    HEALTH_ENUM_GROUPS,
    HEALTH_EQUIPMENT_FIELDS,
    HEALTH_FREE_TEXT_FIELDS,
)
from seniwise.schema.profile_fields import BLOOD_TYPE_VALUES, GENDER_OPTIONS, PROFILE_FIELDS
from seniwise.schema.types import (
    EnumGroup,
    FlagField,
    FreeTextField,
    LookupOption,
    ProfileField,
    VisitActionMeta,
    VisitCategory,
)
from seniwise.schema.visit_categories import VISIT_CATEGORIES

logger = logging.getLogger(__name__)


class SchemaRegistryError(ValueError):
    """Raised when static field declarations are inconsistent."""


@dataclass(frozen=True, slots=True)
class FieldSchemaRegistry:
    """Process-wide field declarations; built once at startup and shared read-only."""

    profile_fields: tuple[ProfileField, ...]
    gender_options: tuple[LookupOption, ...]
    blood_type_values: tuple[str, ...]
    health_enum_groups: tuple[EnumGroup, ...]
    health_free_text_fields: tuple[FreeTextField, ...]
    equipment_fields: tuple[FlagField, ...]
    visit_categories: tuple[VisitCategory, ...]
    visit_actions: Mapping[str, VisitActionMeta]

    def visit_action(self, key: str) -> VisitActionMeta | None:
        return self.visit_actions.get(key)


def flatten_visit_actions(categories: Iterable[VisitCategory]) -> Mapping[str, VisitActionMeta]:
    """Flatten category -> group -> action trees into a lookup keyed by action key."""

    lookup: dict[str, VisitActionMeta] = {}

    def _add(key: str, meta: VisitActionMeta, where: str) -> None:
        if key in lookup:
            raise SchemaRegistryError(f"Duplicate visit action key {key!r} in {where}")
        lookup[key] = meta

    for category in categories:
        for action in category.actions:
            _add(
                action.key,
                VisitActionMeta(
                    label_key=action.label_key,
                    kind=action.kind,
                    category_label_key=category.label_key,
                ),
                category.key,
            )
        for group in category.groups:
            for action in group.actions:
                _add(
                    action.key,
                    VisitActionMeta(
                        label_key=action.label_key,
                        kind=action.kind,
                        category_label_key=category.label_key,
                        group_label_key=group.label_key,
                    ),
                    f"{category.key}/{group.key}",
                )
    return MappingProxyType(lookup)


def _ensure_unique(section: str, keys: Iterable[str]) -> None:
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise SchemaRegistryError(f"Duplicate {section} field key {key!r}")
        seen.add(key)


def build_field_schema_registry(
    *,
    profile_fields: tuple[ProfileField, ...] = PROFILE_FIELDS,
    gender_options: tuple[LookupOption, ...] = GENDER_OPTIONS,
    blood_type_values: tuple[str, ...] = BLOOD_TYPE_VALUES,
    health_enum_groups: tuple[EnumGroup, ...] = HEALTH_ENUM_GROUPS,
    health_free_text_fields: tuple[FreeTextField, ...] = HEALTH_FREE_TEXT_FIELDS,
    equipment_fields: tuple[FlagField, ...] = HEALTH_EQUIPMENT_FIELDS,
    visit_categories: tuple[VisitCategory, ...] = VISIT_CATEGORIES,
) -> FieldSchemaRegistry:
    """Validate declarations and assemble the shared registry."""

    _ensure_unique("profile", (item.key for item in profile_fields))
    _ensure_unique(
        "health",
        [group.key for group in health_enum_groups] + [item.key for item in health_free_text_fields],
    )
    _ensure_unique("equipment", (item.key for item in equipment_fields))
    visit_actions = flatten_visit_actions(visit_categories)

    registry = FieldSchemaRegistry(
        profile_fields=tuple(profile_fields),
        gender_options=tuple(gender_options),
        blood_type_values=tuple(blood_type_values),
        health_enum_groups=tuple(health_enum_groups),
        health_free_text_fields=tuple(health_free_text_fields),
        equipment_fields=tuple(equipment_fields),
        visit_categories=tuple(visit_categories),
        visit_actions=visit_actions,
    )
    logger.info(
        "residents.schema_registry_built profile_fields=%d health_fields=%d equipment_fields=%d visit_actions=%d",
        len(registry.profile_fields),
        len(registry.health_enum_groups) + len(registry.health_free_text_fields),
        len(registry.equipment_fields),
        len(registry.visit_actions),
    )
    return registry
