from datetime import time

from models import Category, ScheduleEntry
from views import build_markers, find_coordinates


def entry(entry_id: int, location, category=Category.sightseeing) -> ScheduleEntry:
    return ScheduleEntry.model_validate(
        {
            "id": entry_id,
            "day": 1,
            "time": time(10, 0),
            "title": f"entry {entry_id}",
            "category": category,
            "location": location,
        }
    )


class TestFindCoordinates:
    def test_substring_match(self):
        assert find_coordinates("아사쿠사 센소지 앞") == (35.7148, 139.7967)

    def test_english_names_ignore_case(self):
        assert find_coordinates("Shibuya Crossing") == (35.6595, 139.7004)

    def test_no_match_or_no_location(self):
        assert find_coordinates("Osaka Castle") is None
        assert find_coordinates("") is None
        assert find_coordinates(None) is None


class TestBuildMarkers:
    def test_unknown_locations_are_omitted(self):
        markers = build_markers(
            [entry(1, "긴자 거리", Category.shopping), entry(2, "somewhere"), entry(3, None)]
        )

        [marker] = markers
        assert marker.id == 1
        assert (marker.lat, marker.lng) == (35.6717, 139.7646)
        assert marker.emoji == "🛍️"
        assert marker.color == "#a855f7"
        assert marker.time == "10:00"
