"""Unit tests for the schema-driven resident field descriptor builder."""

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from seniwise.schema.field_values import MISSING, Flag, Text, TextList, to_json_value
from seniwise.schema.labels import default_label_catalog
from seniwise.schema.profile_fields import PROFILE_FIELD_ORDER
from seniwise.schema.registry import build_field_schema_registry
from seniwise.services.field_descriptors import (
    FieldDescriptorBuilder,
    latest_visit,
)
from seniwise.services.records import StaffDirectory, StaffMember

NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _raw_resident(**profile: object) -> dict[str, object]:
    return {
        "profile": {"uuid": "r-1", "first_name": "Ayse", "last_name": "Kaya", **profile},
        "health": {"mobility": "bedridden", "allergies": "Penicillin"},
        "equipment_used": {"eyeglasses": True, "oxygen": 0},
        "visits": [
            {
                "date": "2025-01-15T11:58:30Z",
                "caretaker": "korhan",
                "actions": [
                    {"key": "medication-administration"},
                    {"key": "blood-pressure", "value": "120/80"},
                    {"key": "pulse"},
                    {"key": "retired-action"},
                ],
            },
            {"date": "2025-01-10T09:00:00Z", "caretaker": "reha", "actions": []},
        ],
        "update_log": [{"date": "2025-01-14T16:40:00Z", "user_id": "korhan", "fields": ["room", "medications"]}],
    }


class FieldValueTests(unittest.TestCase):
    def test_tagged_values_serialize_to_json_shapes(self) -> None:
        self.assertEqual(to_json_value(Text("a")), "a")
        self.assertIs(to_json_value(Flag(True)), True)
        self.assertIsNone(to_json_value(MISSING))
        self.assertEqual(to_json_value(TextList(("a", "b"))), ["a", "b"])

    def test_unknown_value_type_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            to_json_value("raw")  # type: ignore[arg-type]


class FieldDescriptorBuilderTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.registry = build_field_schema_registry()
        cls.resolver = default_label_catalog().resolver("en_us")
        cls.staff = StaffDirectory([StaffMember("korhan", "Korhan Ozmen"), StaffMember("reha", "Reha Yurdakul")])
        cls.builder = FieldDescriptorBuilder(cls.registry, cls.resolver, cls.staff)

    def test_location_defaults_to_home_without_room(self) -> None:
        payload = self.builder.build(_raw_resident(), now=NOW)

        self.assertEqual(payload.profile["location"].value, "Home")
        self.assertEqual(payload.profile["location"].label, "Location")
        self.assertIsNone(payload.profile["room"].value)

    def test_location_uses_room_when_present(self) -> None:
        payload = self.builder.build(_raw_resident(room="12B"), now=NOW)

        self.assertEqual(payload.profile["location"].value, "Room 12B")
        self.assertEqual(payload.profile["room"].value, "12B")

    def test_blank_room_is_home(self) -> None:
        payload = self.builder.build(_raw_resident(room="   "), now=NOW)

        self.assertEqual(payload.profile["location"].value, "Home")

    def test_profile_keys_follow_declaration_order(self) -> None:
        payload = self.builder.build(_raw_resident(mobile_phone="1", address="x"), now=NOW)

        self.assertEqual(list(payload.profile), list(PROFILE_FIELD_ORDER) + ["location"])

    def test_profile_metadata_flags_and_defaults(self) -> None:
        profile = self.builder.build(_raw_resident(), now=NOW).profile

        self.assertTrue(profile["uuid"].hidden)
        self.assertTrue(profile["updated_by"].readonly)
        self.assertEqual(profile["address"].input_type, "textarea")
        self.assertEqual(profile["first_name"].input_type, "text")
        self.assertIsNone(profile["image"].value)
        self.assertEqual(profile["birthplace"].value, "")
        self.assertEqual(profile["first_name"].label, "First Name")

    def test_profile_option_lists(self) -> None:
        profile = self.builder.build(_raw_resident(), now=NOW).profile

        self.assertEqual(
            [(option.value, option.label) for option in profile["gender"].options],
            [("male", "Male"), ("female", "Female")],
        )
        self.assertEqual([option.value for option in profile["responsible_staff"].options], ["korhan", "reha"])
        self.assertEqual(profile["blood_type"].options[0].label, "0 RH+")
        self.assertEqual(len(profile["blood_type"].options), 8)
        self.assertIsNone(profile["first_name"].options)

    def test_health_groups_and_free_text(self) -> None:
        health = self.builder.build(_raw_resident(), now=NOW).health

        self.assertEqual(health["mobility"].value, "bedridden")
        self.assertEqual(health["mobility"].label, "Mobility")
        self.assertIn("Bedridden", [option.label for option in health["mobility"].options])
        self.assertEqual(health["vision"].value, "")
        self.assertEqual(health["allergies"].value, "Penicillin")
        self.assertEqual(health["allergies"].input_type, "textarea")
        self.assertTrue(health["allergies"].notes)
        self.assertEqual(list(health)[:6], [group.key for group in self.registry.health_enum_groups])

    def test_equipment_flags_default_to_false(self) -> None:
        equipment = self.builder.build(_raw_resident(), now=NOW).equipment_used

        self.assertIs(equipment["eyeglasses"].value, True)
        self.assertIs(equipment["oxygen"].value, False)
        self.assertIs(equipment["cpap"].value, False)
        self.assertEqual(len(equipment), len(self.registry.equipment_fields))

    def test_visit_actions_resolve_against_lookup(self) -> None:
        visits = self.builder.build(_raw_resident(), now=NOW).visits
        items = {item.key: item for item in visits.entries[0].actions.items}

        self.assertEqual(visits.label, "Visits")
        self.assertEqual(visits.entries[0].caretaker.value, "korhan")
        self.assertIs(items["medication-administration"].value, True)
        self.assertEqual(items["medication-administration"].category, "Medical Care")
        self.assertEqual(items["medication-administration"].group, "")
        self.assertEqual(items["blood-pressure"].value, "120/80")
        self.assertEqual(items["blood-pressure"].group, "Vital Measurements")
        self.assertEqual(items["pulse"].value, "")
        self.assertEqual(items["retired-action"].label, "retired-action")
        self.assertEqual(items["retired-action"].value, "")
        self.assertEqual(items["retired-action"].category, "")

    def test_update_log_entries(self) -> None:
        update_log = self.builder.build(_raw_resident(), now=NOW).update_log

        self.assertEqual(update_log.label, "Update Log")
        self.assertEqual(update_log.entries[0]["fields"].value, ["room", "medications"])
        self.assertEqual(update_log.entries[0]["user_id"].value, "korhan")

    def test_last_visit_summary_uses_latest_date(self) -> None:
        summary = self.builder.build(_raw_resident(), now=NOW).last_visit

        self.assertEqual(summary.date.value, "2025-01-15 11:58")
        self.assertEqual(summary.relative.value, "1 min ago")
        self.assertEqual(summary.display, "2025-01-15 11:58 (1 min ago)")

    def test_resident_without_visits_has_empty_summary(self) -> None:
        payload = FieldDescriptorBuilder(self.registry, self.resolver).build({"profile": {"uuid": "x"}}, now=NOW)

        self.assertEqual(payload.visits.entries, [])
        self.assertEqual(payload.last_visit.display, "")
        self.assertEqual(payload.profile["first_name"].value, "")
        self.assertEqual(payload.profile["responsible_staff"].options, [])

    def test_out_of_range_visit_date_has_empty_summary(self) -> None:
        raw = {"profile": {"uuid": "x"}, "visits": [{"date": "9999-12-31T23:30:00-01:00"}]}

        summary = self.builder.build(raw, now=NOW).last_visit

        self.assertEqual(summary.date.value, "")
        self.assertEqual(summary.relative.value, "")
        self.assertEqual(summary.display, "")

    def test_latest_visit_skips_entries_without_dates(self) -> None:
        visits = [{"date": "2025-01-01"}, {"caretaker": "x"}, "junk", {"date": "2025-02-01"}]

        self.assertEqual(latest_visit(visits), {"date": "2025-02-01"})
        self.assertIsNone(latest_visit(None))

    def test_visit_form_lists_localized_categories(self) -> None:
        form = self.builder.build_visit_form(_raw_resident())

        self.assertEqual(form.resident.name, "Ayse Kaya")
        self.assertEqual([category.key for category in form.visit_categories][0], "medical-care")
        vitals = form.visit_categories[0].groups[0]
        self.assertEqual(vitals.label, "Vital Measurements")
        self.assertEqual(vitals.actions[0].type, "text")


if __name__ == "__main__":
    unittest.main()
