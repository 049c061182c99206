from .map import CATEGORY_STYLES, MapMarker, build_markers, find_coordinates
from .projections import (
    DaySchedule,
    PersonProgress,
    category_counts_by_day,
    completion_by_person,
    entries_for_day,
    group_by_day,
    items_for_person,
)

__all__ = [
    "CATEGORY_STYLES",
    "DaySchedule",
    "MapMarker",
    "PersonProgress",
    "build_markers",
    "category_counts_by_day",
    "completion_by_person",
    "entries_for_day",
    "find_coordinates",
    "group_by_day",
    "items_for_person",
]
