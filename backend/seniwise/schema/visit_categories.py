"""Visit categories, groups and actions recorded by caretakers."""

from __future__ import annotations

from seniwise.schema.types import ValueKind, VisitAction, VisitCategory, VisitGroup


def _action(key: str, icon: str, kind: ValueKind = "boolean") -> VisitAction:
    return VisitAction(key=key, label_key=f"visits.action.{key}", icon=icon, kind=kind)


def _visit_group(key: str, icon: str, *actions: VisitAction) -> VisitGroup:
    return VisitGroup(key=key, label_key=f"visits.group.{key}", icon=icon, actions=actions)


VISIT_CATEGORIES: tuple[VisitCategory, ...] = (
    VisitCategory(
        key="medical-care",
        label_key="visits.category.medical-care",
        icon="fa-briefcase-medical",
        actions=(
            _action("medication-administration", "fa-pills"),
            _action("wound-care-dressing", "fa-bandage"),
            _action("injections-iv-therapy", "fa-syringe"),
            _action("medical-reporting-referrals", "fa-file-medical"),
        ),
        groups=(
            _visit_group(
                "vital-measurements",
                "fa-stethoscope",
                _action("blood-pressure", "fa-heart-pulse", "text"),
                _action("pulse", "fa-wave-square", "text"),
                _action("temperature", "fa-thermometer-half", "text"),
                _action("oxygen-saturation", "fa-lungs", "text"),
            ),
        ),
    ),
    VisitCategory(
        key="personal-care",
        label_key="visits.category.personal-care",
        icon="fa-user-nurse",
        actions=(
            _action("toileting-incontinence-care", "fa-toilet"),
            _action("dressing-undressing-assistance", "fa-shirt"),
            _action("feeding-assistance", "fa-utensils"),
            _action("companionship-emotional-support", "fa-heart"),
        ),
        groups=(
            _visit_group(
                "personal-hygiene",
                "fa-shower",
                _action("in-bed-body-cleaning", "fa-bed"),
                _action("bathing-shower-assistance", "fa-shower"),
                _action("hair-cutting-care", "fa-scissors"),
                _action("nail-care", "fa-hand-sparkles"),
            ),
            _visit_group(
                "mobility-support",
                "fa-person-walking",
                _action("assisted-walking", "fa-walking"),
                _action("transfers-bed-to-chair", "fa-exchange-alt"),
                _action("wheelchair-use", "fa-wheelchair"),
            ),
        ),
    ),
    VisitCategory(
        key="housekeeping",
        label_key="visits.category.housekeeping",
        icon="fa-broom",
        actions=(
            _action("room-cleaning-tidying", "fa-broom"),
            _action("laundry-clothing-care", "fa-soap"),
            _action("bed-linen-changes", "fa-bed"),
            _action("shared-space-maintenance", "fa-users"),
        ),
        groups=(
            _visit_group(
                "environmental-hygiene",
                "fa-spray-can",
                _action("disinfection", "fa-spray-can-sparkles"),
                _action("odor-control", "fa-wind"),
            ),
        ),
    ),
    VisitCategory(
        key="supportive-services",
        label_key="visits.category.supportive-services",
        icon="fa-handshake-angle",
        groups=(
            _visit_group(
                "meal-service-dietary-monitoring",
                "fa-utensils",
                _action("regular-meals", "fa-utensils"),
                _action("tube-feeding", "fa-hand-holding-medical"),
                _action("iv-nutrition", "fa-vial"),
                _action("other-nutrition-methods", "fa-bottle-water"),
                _action("meal-refused", "fa-ban"),
            ),
            _visit_group(
                "activity-support",
                "fa-people-group",
                _action("rehabilitation-exercises", "fa-dumbbell"),
                _action("group-activities", "fa-users"),
            ),
        ),
    ),
)
