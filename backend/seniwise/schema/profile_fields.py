"""Resident profile field declarations."""

from __future__ import annotations

from seniwise.schema.types import LookupOption, ProfileField

_HIDDEN = {"uuid", "image", "active"}
_READONLY = {"created_at", "created_by", "updated_at", "updated_by"}
_TEXTAREA = {"address"}
_NULLABLE = {"image", "room"}

PROFILE_FIELD_ORDER: tuple[str, ...] = (
    "uuid",
    "image",
    "active",
    "created_at",
    "updated_at",
    "created_by",
    "updated_by",
    "responsible_staff",
    "first_name",
    "last_name",
    "gender",
    "room",
    "date_of_birth",
    "birthplace",
    "nationality",
    "identification_number",
    "address",
    "blood_type",
    "home_phone",
    "mobile_phone",
)

PROFILE_FIELDS: tuple[ProfileField, ...] = tuple(
    ProfileField(
        key=key,
        label_key=f"profile.{key}",
        hidden=key in _HIDDEN,
        readonly=key in _READONLY,
        nullable=key in _NULLABLE,
        input_kind="textarea" if key in _TEXTAREA else "text",
    )
    for key in PROFILE_FIELD_ORDER
)

GENDER_OPTIONS: tuple[LookupOption, ...] = (
    LookupOption(value="male", label_key="gender.long.male"),
    LookupOption(value="female", label_key="gender.long.female"),
)

BLOOD_TYPE_VALUES: tuple[str, ...] = (
    "0 rh+",
    "0 rh-",
    "a rh+",
    "a rh-",
    "b rh+",
    "b rh-",
    "ab rh+",
    "ab rh-",
)
