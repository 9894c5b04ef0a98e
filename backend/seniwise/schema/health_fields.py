"""Health categories, free-text health fields and equipment flags."""

from __future__ import annotations

from seniwise.schema.types import EnumGroup, FlagField, FreeTextField, LookupOption


def _group(key: str, label_slug: str, values: tuple[str, ...]) -> EnumGroup:
    return EnumGroup(
        key=key,
        label_key=f"health.category.{label_slug}",
        options=tuple(
            LookupOption(value=value, label_key=f"health.{label_slug}.{value}") for value in values
        ),
    )


HEALTH_ENUM_GROUPS: tuple[EnumGroup, ...] = (
    _group("independence", "independence", ("independent", "partial-assistance", "full-care")),
    _group(
        "mobility",
        "mobility",
        (
            "normal",
            "bedridden",
            "wheelchair-dependent",
            "crutches-or-cane",
            "slow-or-unstable-walking",
        ),
    ),
    _group(
        "motor_function",
        "motor-function",
        ("normal-hand-function", "limited-hand-function", "fine-motor-difficulty"),
    ),
    _group("vision", "vision", ("normal", "impaired", "blind")),
    _group("hearing", "hearing", ("normal", "impaired", "deaf")),
    _group(
        "cognitive_status",
        "cognitive-status",
        ("normal-cognition", "mild-cognitive-impairment", "dementia-alzheimers-symptoms"),
    ),
)

HEALTH_FREE_TEXT_FIELDS: tuple[FreeTextField, ...] = tuple(
    FreeTextField(
        key=key,
        label_key=f"health.free-text.{key.replace('_', '-')}",
        notes_key=f"health.free-text.{key.replace('_', '-')}.notes",
        input_kind="textarea",
    )
    for key in ("chronic_illness", "medications", "allergies", "medical_history")
)

HEALTH_EQUIPMENT_FIELDS: tuple[FlagField, ...] = tuple(
    FlagField(key=key, label_key=f"health.equipment.{key.replace('_', '-')}")
    for key in (
        "artificial_pacemaker",
        "catheter",
        "chemotherapy_port",
        "cochlear_implant",
        "contact_lens",
        "cpap",
        "eyeglasses",
        "hearing_aid",
        "cardio_defibrillator_iacd",
        "insulin_pump",
        "oxygen",
        "prosthetic_heart_valves",
        "bioprosthetic",
    )
)
