"""Resident list and detail query services."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from time import perf_counter
from typing import Any

from seniwise.schema.labels import LabelResolver
from seniwise.schema.registry import FieldSchemaRegistry
from seniwise.schemas.listing import Column, ListResult
from seniwise.schemas.resident import LocalizedResident, VisitFormData
from seniwise.services.field_descriptors import FieldDescriptorBuilder, latest_visit
from seniwise.services.list_transform import ListQuery, ListView, transform
from seniwise.services.records import ResidentRecordSource, StaffDirectory
from seniwise.services.relative_time import age_on, format_timestamp, parse_date

logger = logging.getLogger(__name__)

DEFAULT_SORT_KEY = "name"


@dataclass(frozen=True, slots=True)
class ResidentRow:
    """Flattened resident projection used for filtering, sorting and list rendering."""

    uuid: str
    first_name: str
    last_name: str
    name: str
    responsible_staff_name: str
    birth_date: str
    birth_date_display: str
    gender: str
    gender_short: str
    gender_long: str
    room: str
    room_display: str
    last_visit_date: str
    last_visit_staff: str
    last_visit_display: str

    def as_item(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "responsible_staff": self.responsible_staff_name,
            "birth_date": self.birth_date_display,
            "room": self.room_display,
            "gender": self.gender,
            "gender_short": self.gender_short,
            "gender_long": self.gender_long,
            "last_visit_date": self.last_visit_date,
            "last_visit_staff": self.last_visit_staff,
            "last_visit_display": self.last_visit_display,
        }


def _text(mapping: Mapping[str, Any], key: str) -> str:
    value = mapping.get(key)
    return value if isinstance(value, str) else ""


def build_resident_row(
    raw: Mapping[str, Any],
    *,
    resolver: LabelResolver,
    staff: StaffDirectory,
    now: datetime,
) -> ResidentRow:
    """Project a raw resident record into its list row."""

    profile = raw.get("profile")
    profile = profile if isinstance(profile, Mapping) else {}
    first_name = _text(profile, "first_name")
    last_name = _text(profile, "last_name")

    birth_date = _text(profile, "date_of_birth")
    parsed_birth = parse_date(birth_date)
    birth_display = f"{birth_date} ({age_on(parsed_birth, now.date())})" if parsed_birth else birth_date

    gender = _text(profile, "gender")
    gender_short = resolver.resolve_or(f"gender.short.{gender}", gender[:1].upper())
    gender_long = resolver.resolve_or(f"gender.long.{gender}", gender)

    room = _text(profile, "room")

    latest = latest_visit(raw.get("visits"))
    last_visit_date = latest["date"] if latest is not None else ""
    caretaker = latest.get("caretaker") if latest is not None else ""
    caretaker = caretaker if isinstance(caretaker, str) else ""

    return ResidentRow(
        uuid=_text(profile, "uuid"),
        first_name=first_name,
        last_name=last_name,
        name=f"{first_name} {last_name}".strip(),
        responsible_staff_name=staff.display_name(_text(profile, "responsible_staff")),
        birth_date=birth_date,
        birth_date_display=birth_display,
        gender=gender,
        gender_short=gender_short,
        gender_long=gender_long,
        room=room,
        room_display=room or "-",
        last_visit_date=last_visit_date,
        last_visit_staff=staff.display_name(caretaker),
        last_visit_display=format_timestamp(last_visit_date, now=now).combined,
    )


def resident_columns(resolver: LabelResolver) -> tuple[Column, ...]:
    """Column schema for the residents table."""

    def _label(suffix: str, fallback: str) -> str:
        return resolver.resolve_or(f"residents.column.{suffix}", fallback)

    return (
        Column(
            key="name",
            label=_label("name", "Name"),
            sortable=True,
            sort_key="name",
            link_template="/residents/{uuid}",
        ),
        Column(
            key="responsible_staff",
            label=_label("responsible_staff", "Responsible Staff"),
            sortable=True,
            sort_key="responsible_staff",
        ),
        Column(key="birth_date", label=_label("birth_date", "Birth Date"), sortable=True, sort_key="birth_date"),
        Column(key="room", label=_label("room", "Room"), sortable=True, sort_key="room"),
        Column(key="gender_short", label=_label("gender", "Gender"), sortable=True, sort_key="gender"),
        Column(
            key="last_visit_display",
            label=_label("last_visit", "Last Visit"),
            sortable=True,
            sort_key="last_visit_date",
        ),
    )


def resident_list_view(resolver: LabelResolver) -> ListView[ResidentRow]:
    return ListView(
        columns=resident_columns(resolver),
        sort_fields={
            "name": lambda row: (row.first_name, row.last_name),
            "responsible_staff": lambda row: row.responsible_staff_name,
            "birth_date": lambda row: row.birth_date,
            "gender": lambda row: row.gender,
            "room": lambda row: row.room,
            "last_visit_date": lambda row: row.last_visit_date,
            "last_visit_staff": lambda row: row.last_visit_staff,
        },
        default_sort_key=DEFAULT_SORT_KEY,
        search_fields=lambda row: (row.first_name, row.last_name, row.name),
        tie_breaker=lambda row: row.name,
        project=ResidentRow.as_item,
        search_placeholder=resolver.resolve_or("residents.search.name", "Search by name"),
    )


def list_residents(
    source: ResidentRecordSource,
    query: ListQuery,
    *,
    resolver: LabelResolver,
    staff: StaffDirectory,
    page_size: int,
    now: datetime | None = None,
) -> ListResult:
    """Return one page of residents for the list view."""

    started = perf_counter()
    reference = now or datetime.now(timezone.utc)
    rows: Iterable[ResidentRow] = (
        build_resident_row(raw, resolver=resolver, staff=staff, now=reference) for raw in source.all()
    )
    result = transform(rows, query, resident_list_view(resolver), page_size)
    logger.debug(
        "residents.list_timing query=%r page=%d sort_by=%s sort_order=%s total_items=%d total_ms=%.2f",
        query.search_text,
        result.pagination.current,
        result.sort.by,
        result.sort.order,
        result.pagination.total_items,
        (perf_counter() - started) * 1000.0,
    )
    return result


def get_resident_detail(
    source: ResidentRecordSource,
    uuid: str,
    *,
    registry: FieldSchemaRegistry,
    resolver: LabelResolver,
    staff: StaffDirectory,
    now: datetime | None = None,
) -> LocalizedResident | None:
    """Return the localized resident payload, or None when the uuid is unknown."""

    raw = source.get(uuid)
    if raw is None:
        return None
    return FieldDescriptorBuilder(registry, resolver, staff).build(raw, now=now)


def get_visit_form(
    source: ResidentRecordSource,
    uuid: str,
    *,
    registry: FieldSchemaRegistry,
    resolver: LabelResolver,
    staff: StaffDirectory,
) -> VisitFormData | None:
    """Return the add-visit form payload, or None when the uuid is unknown."""

    raw = source.get(uuid)
    if raw is None:
        return None
    return FieldDescriptorBuilder(registry, resolver, staff).build_visit_form(raw)
