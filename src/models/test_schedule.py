from datetime import time

import pydantic
import pytest

from models import Category, ScheduleEntry, ScheduleFields, ScheduleUpdate


class TestScheduleFields:
    def test_blank_optional_fields_become_none(self):
        fields = ScheduleFields(time=" ", title=" Dinner ", description="", location="  ")

        assert fields.time is None
        assert fields.title == "Dinner"
        assert fields.description is None
        assert fields.location is None
        assert fields.missing_required() == ["time"]

    def test_category_defaults_and_legacy_labels(self):
        assert ScheduleFields(category="").category == Category.sightseeing
        assert ScheduleFields(category="이동").category == Category.transit
        assert ScheduleFields(category="Meal").category == Category.meal

    def test_unknown_category_is_invalid(self):
        with pytest.raises(pydantic.ValidationError):
            ScheduleFields(category="nightlife")

    def test_form_dump_uses_store_representation(self):
        fields = ScheduleFields(day=2, time="07:05", title="Fish market")

        assert fields.model_dump(mode="json") == {
            "day": 2,
            "time": "07:05:00",
            "title": "Fish market",
            "description": None,
            "category": "sightseeing",
            "location": None,
        }


class TestScheduleUpdate:
    def test_only_given_fields_are_sent(self):
        update = ScheduleUpdate(title="Shrine visit", location="")

        assert update.changes() == {"title": "Shrine visit", "location": None}
        assert update.missing_required() == []

    def test_given_blank_required_fields_are_missing(self):
        assert ScheduleUpdate(title=" ", time="").missing_required() == ["time", "title"]


def test_editable_fields_round_trip_into_update():
    entry = ScheduleEntry.model_validate(
        {"id": 1, "day": 3, "time": "18:30:00", "title": "Izakaya", "category": "식사"}
    )

    update = ScheduleUpdate.model_validate(entry.editable_fields())

    assert entry.time == time(18, 30)
    assert update.changes()["category"] == "meal"
    assert update.changes()["description"] is None
