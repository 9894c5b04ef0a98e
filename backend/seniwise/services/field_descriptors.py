"""Schema-driven conversion of raw resident records into localized field sets."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from seniwise.schema.field_values import (
    MISSING,
    FieldValue,
    Text,
    flag_value,
    nullable_value,
    text_list_value,
    text_value,
    to_json_value,
)
from seniwise.schema.labels import LabelResolver
from seniwise.schema.registry import FieldSchemaRegistry
from seniwise.schema.types import InputKind, VisitAction, VisitCategory
from seniwise.schemas.resident import (
    FieldOption,
    LastVisitSummary,
    LocalizedField,
    LocalizedResident,
    LocalizedUpdateLog,
    LocalizedVisitAction,
    LocalizedVisitActions,
    LocalizedVisitEntry,
    LocalizedVisits,
    VisitFormAction,
    VisitFormCategory,
    VisitFormData,
    VisitFormGroup,
    VisitFormResident,
)
from seniwise.services.records import StaffDirectory
from seniwise.services.relative_time import format_timestamp


@dataclass(slots=True)
class FieldDescriptor:
    """Localized, display-ready projection of one raw attribute."""

    label: str
    value: FieldValue = MISSING
    options: tuple[FieldOption, ...] | None = None
    notes: str | None = None
    hidden: bool = False
    readonly: bool = False
    input_kind: InputKind = "text"

    def to_schema(self) -> LocalizedField:
        return LocalizedField(
            label=self.label,
            value=to_json_value(self.value),
            options=list(self.options) if self.options is not None else None,
            notes=self.notes,
            hidden=self.hidden,
            readonly=self.readonly,
            input_type=self.input_kind,
        )


def _mapping(value: object) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _entries(value: object) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


def latest_visit(visits: object) -> Mapping[str, Any] | None:
    """Return the visit with the greatest ISO date string, first one winning ties."""

    latest: Mapping[str, Any] | None = None
    for visit in _entries(visits):
        visit_date = visit.get("date")
        if not isinstance(visit_date, str) or not visit_date:
            continue
        if latest is None or visit_date > latest["date"]:
            latest = visit
    return latest


class FieldDescriptorBuilder:
    """Build localized resident payloads from raw records and the field registry."""

    def __init__(
        self,
        registry: FieldSchemaRegistry,
        resolver: LabelResolver,
        staff: StaffDirectory | None = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.staff = staff or StaffDirectory(())

    def label(self, key: str | None, fallback: str, *values: object) -> str:
        return self.resolver.resolve_or(key, fallback, *values)

    def build(self, raw: Mapping[str, Any], *, now: datetime | None = None) -> LocalizedResident:
        """Return the full localized payload for one raw resident record."""

        def _dump(fields: Mapping[str, FieldDescriptor]) -> dict[str, LocalizedField]:
            return {key: descriptor.to_schema() for key, descriptor in fields.items()}

        return LocalizedResident(
            profile=_dump(self.build_profile(_mapping(raw.get("profile")))),
            health=_dump(self.build_health(_mapping(raw.get("health")))),
            equipment_used=_dump(self.build_equipment(_mapping(raw.get("equipment_used")))),
            update_log=self.build_update_log(raw.get("update_log")),
            visits=self.build_visits(raw.get("visits")),
            last_visit=self.build_last_visit(raw.get("visits"), now=now),
        )

    def profile_options(self, key: str) -> tuple[FieldOption, ...] | None:
        if key == "gender":
            return tuple(
                FieldOption(value=option.value, label=self.label(option.label_key, option.value))
                for option in self.registry.gender_options
            )
        if key == "responsible_staff":
            return tuple(
                FieldOption(value=member.username, label=member.username) for member in self.staff.members
            )
        if key == "blood_type":
            return tuple(
                FieldOption(value=value, label=value.upper()) for value in self.registry.blood_type_values
            )
        return None

    def build_profile(self, profile: Mapping[str, Any]) -> dict[str, FieldDescriptor]:
        fields: dict[str, FieldDescriptor] = {}
        for spec in self.registry.profile_fields:
            raw_value = profile.get(spec.key)
            fields[spec.key] = FieldDescriptor(
                label=self.label(spec.label_key, spec.key),
                value=nullable_value(raw_value) if spec.nullable else text_value(raw_value),
                options=self.profile_options(spec.key),
                hidden=spec.hidden,
                readonly=spec.readonly,
                input_kind=spec.input_kind,
            )
        fields["location"] = FieldDescriptor(
            label=self.label("profile.location", "Location"),
            value=Text(self.location(profile.get("room"))),
        )
        return fields

    def location(self, room: object) -> str:
        """Derive the display location from a raw room value."""

        room_text = room.strip() if isinstance(room, str) else ""
        if room_text:
            return self.label("profile.location.room", f"Room {room_text}", room_text)
        return self.label("profile.location.home", "Home")

    def build_health(self, health: Mapping[str, Any]) -> dict[str, FieldDescriptor]:
        fields: dict[str, FieldDescriptor] = {}
        for group in self.registry.health_enum_groups:
            fields[group.key] = FieldDescriptor(
                label=self.label(group.label_key, group.key),
                value=text_value(health.get(group.key)),
                options=tuple(
                    FieldOption(value=option.value, label=self.label(option.label_key, option.value))
                    for option in group.options
                ),
            )
        for spec in self.registry.health_free_text_fields:
            fields[spec.key] = FieldDescriptor(
                label=self.label(spec.label_key, spec.key),
                value=text_value(health.get(spec.key)),
                notes=self.label(spec.notes_key, ""),
                input_kind=spec.input_kind,
            )
        return fields

    def build_equipment(self, equipment: Mapping[str, Any]) -> dict[str, FieldDescriptor]:
        return {
            spec.key: FieldDescriptor(
                label=self.label(spec.label_key, spec.key),
                value=flag_value(equipment.get(spec.key)),
            )
            for spec in self.registry.equipment_fields
        }

    def build_update_log(self, entries: object) -> LocalizedUpdateLog:
        date_label = self.label("update_log.date", "Date")
        user_label = self.label("update_log.user_id", "User ID")
        fields_label = self.label("update_log.fields", "Fields")
        return LocalizedUpdateLog(
            label=self.label("update_log", "Update Log"),
            entries=[
                {
                    "date": FieldDescriptor(label=date_label, value=text_value(entry.get("date") or "")).to_schema(),
                    "user_id": FieldDescriptor(
                        label=user_label, value=text_value(entry.get("user_id") or "")
                    ).to_schema(),
                    "fields": FieldDescriptor(
                        label=fields_label, value=text_list_value(entry.get("fields"))
                    ).to_schema(),
                }
                for entry in _entries(entries)
            ],
        )

    def resolve_visit_action(self, action: Mapping[str, Any]) -> LocalizedVisitAction:
        """Localize one recorded visit action against the flattened action lookup."""

        key = str(action.get("key") or "")
        meta = self.registry.visit_action(key)
        raw_value = action.get("value")
        if isinstance(raw_value, str):
            value: str | bool = raw_value
        elif meta is not None and meta.kind == "boolean":
            value = True
        else:
            value = ""
        if meta is None:
            return LocalizedVisitAction(key=key, label=key, value=value, category="", group="")
        return LocalizedVisitAction(
            key=key,
            label=self.label(meta.label_key, key),
            value=value,
            category=self.label(meta.category_label_key, ""),
            group=self.label(meta.group_label_key, "") if meta.group_label_key else "",
        )

    def build_visits(self, entries: object) -> LocalizedVisits:
        date_label = self.label("visits.date", "Date")
        caretaker_label = self.label("visits.caretaker", "Caretaker")
        actions_label = self.label("visits.actions", "Actions")
        return LocalizedVisits(
            label=self.label("visits", "Visits"),
            entries=[
                LocalizedVisitEntry(
                    date=FieldDescriptor(label=date_label, value=text_value(entry.get("date") or "")).to_schema(),
                    caretaker=FieldDescriptor(
                        label=caretaker_label, value=text_value(entry.get("caretaker") or "")
                    ).to_schema(),
                    actions=LocalizedVisitActions(
                        label=actions_label,
                        items=[self.resolve_visit_action(action) for action in _entries(entry.get("actions"))],
                    ),
                )
                for entry in _entries(entries)
            ],
        )

    def build_last_visit(self, visits: object, *, now: datetime | None = None) -> LastVisitSummary:
        latest = latest_visit(visits)
        shown = format_timestamp(latest["date"] if latest is not None else None, now=now)
        return LastVisitSummary(
            label=self.label("visits.last_visit", "Last Visit"),
            date=LocalizedField(label=self.label("visits.date", "Date"), value=shown.display_date),
            relative=LocalizedField(label=self.label("visits.relative", "Relative"), value=shown.relative),
            display=shown.combined,
        )

    def build_visit_form(self, raw: Mapping[str, Any]) -> VisitFormData:
        """Return the resident header and localized visit category tree for the add-visit screen."""

        profile = _mapping(raw.get("profile"))
        first_name = profile.get("first_name") if isinstance(profile.get("first_name"), str) else ""
        last_name = profile.get("last_name") if isinstance(profile.get("last_name"), str) else ""
        return VisitFormData(
            resident=VisitFormResident(
                uuid=str(profile.get("uuid") or ""),
                first_name=first_name,
                last_name=last_name,
                name=f"{first_name} {last_name}".strip(),
            ),
            visit_categories=[self._visit_form_category(category) for category in self.registry.visit_categories],
        )

    def _visit_form_actions(self, actions: Sequence[VisitAction]) -> list[VisitFormAction]:
        return [
            VisitFormAction(
                key=action.key,
                label=self.label(action.label_key, action.key),
                icon=action.icon,
                type=action.kind,
            )
            for action in actions
        ]

    def _visit_form_category(self, category: VisitCategory) -> VisitFormCategory:
        return VisitFormCategory(
            key=category.key,
            label=self.label(category.label_key, category.key),
            icon=category.icon,
            actions=self._visit_form_actions(category.actions),
            groups=[
                VisitFormGroup(
                    key=group.key,
                    label=self.label(group.label_key, group.key),
                    icon=group.icon,
                    actions=self._visit_form_actions(group.actions),
                )
                for group in category.groups
            ],
        )
