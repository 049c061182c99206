from models import ChecklistItem, ScheduleEntry
from views import category_counts_by_day, completion_by_person, entries_for_day, group_by_day


def entry(day: int, at: str, category: str = "sightseeing") -> ScheduleEntry:
    return ScheduleEntry.model_validate(
        {"id": day * 100 + int(at[:2]), "day": day, "time": at, "title": at, "category": category}
    )


ENTRIES = [
    entry(1, "09:00"),
    entry(1, "12:00", "meal"),
    entry(3, "08:00", "transit"),
    entry(3, "07:00", "meal"),
]


def test_entries_for_day_keeps_snapshot_order():
    assert [e.title for e in entries_for_day(ENTRIES, 3)] == ["08:00", "07:00"]
    assert entries_for_day(ENTRIES, 2) == []


def test_group_by_day_sorts_and_fills_requested_days():
    calendar = group_by_day(ENTRIES, days=[1, 2, 3])

    assert [d.day for d in calendar] == [1, 2, 3]
    assert calendar[1].entries == []
    assert [e.title for e in calendar[2].entries] == ["07:00", "08:00"]


def test_category_counts_by_day():
    counts = category_counts_by_day(ENTRIES)

    assert counts == {
        1: {"sightseeing": 1, "meal": 1, "shopping": 0, "transit": 0},
        3: {"sightseeing": 0, "meal": 1, "shopping": 0, "transit": 1},
    }


def test_completion_by_person():
    items = [
        ChecklistItem(id=1, person="A", title="x", is_completed=True),
        ChecklistItem(id=2, person="A", title="y"),
        ChecklistItem(id=3, person="B", title="z"),
    ]

    progress = completion_by_person(items, ["A", "B", "C"])

    assert [(p.person, p.completed, p.total) for p in progress] == [
        ("A", 1, 2),
        ("B", 0, 1),
        ("C", 0, 0),
    ]
