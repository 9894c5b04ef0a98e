"""Schemas for localized resident payloads."""

from typing import Literal

from pydantic import BaseModel

from seniwise.schema.types import ValueKind


class FieldOption(BaseModel):
    value: str
    label: str


class LocalizedField(BaseModel):
    """Display-ready projection of one raw resident attribute."""

    label: str
    value: str | bool | list[str] | None = None
    options: list[FieldOption] | None = None
    notes: str | None = None
    hidden: bool = False
    readonly: bool = False
    input_type: Literal["text", "textarea"] = "text"


class LocalizedVisitAction(BaseModel):
    key: str
    label: str
    value: str | bool | None
    category: str
    group: str


class LocalizedVisitActions(BaseModel):
    label: str
    items: list[LocalizedVisitAction]


class LocalizedVisitEntry(BaseModel):
    date: LocalizedField
    caretaker: LocalizedField
    actions: LocalizedVisitActions


class LocalizedVisits(BaseModel):
    label: str
    entries: list[LocalizedVisitEntry]


class LocalizedUpdateLog(BaseModel):
    label: str
    entries: list[dict[str, LocalizedField]]


class LastVisitSummary(BaseModel):
    label: str
    date: LocalizedField
    relative: LocalizedField
    display: str


class LocalizedResident(BaseModel):
    """Full localized resident payload for the detail view."""

    profile: dict[str, LocalizedField]
    health: dict[str, LocalizedField]
    equipment_used: dict[str, LocalizedField]
    update_log: LocalizedUpdateLog
    visits: LocalizedVisits
    last_visit: LastVisitSummary


class VisitFormAction(BaseModel):
    key: str
    label: str
    icon: str
    type: ValueKind


class VisitFormGroup(BaseModel):
    key: str
    label: str
    icon: str
    actions: list[VisitFormAction]


class VisitFormCategory(BaseModel):
    key: str
    label: str
    icon: str
    actions: list[VisitFormAction]
    groups: list[VisitFormGroup]


class VisitFormResident(BaseModel):
    uuid: str
    first_name: str
    last_name: str
    name: str


class VisitFormData(BaseModel):
    """Payload for the add-visit screen."""

    resident: VisitFormResident
    visit_categories: list[VisitFormCategory]
