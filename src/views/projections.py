"""Read-only projections of the entry and checklist snapshots."""

from collections import Counter
from typing import Dict, Iterable, List, Sequence

from pydantic import BaseModel

from models import Category, ChecklistItem, ScheduleEntry


class DaySchedule(BaseModel):
    day: int
    entries: List[ScheduleEntry]


class PersonProgress(BaseModel):
    person: str
    completed: int
    total: int


def entries_for_day(entries: Iterable[ScheduleEntry], day: int) -> List[ScheduleEntry]:
    """Entries on one day, in the order of the snapshot."""
    return [entry for entry in entries if entry.day == day]


def group_by_day(
    entries: Iterable[ScheduleEntry], days: Sequence[int] = ()
) -> List[DaySchedule]:
    """
    Calendar view: one bucket per day, days ascending, entries in time order.

    Days listed in ``days`` get a bucket even when they have no entries.
    """
    buckets: Dict[int, List[ScheduleEntry]] = {day: [] for day in days}
    for entry in entries:
        buckets.setdefault(entry.day, []).append(entry)
    return [
        DaySchedule(day=day, entries=sorted(buckets[day], key=lambda e: e.time))
        for day in sorted(buckets)
    ]


def category_counts_by_day(entries: Iterable[ScheduleEntry]) -> Dict[int, Dict[str, int]]:
    counts: Dict[int, Counter] = {}
    for entry in entries:
        counts.setdefault(entry.day, Counter())[entry.category.value] += 1
    return {
        day: {category.value: counts[day][category.value] for category in Category}
        for day in sorted(counts)
    }


def items_for_person(items: Iterable[ChecklistItem], person: str) -> List[ChecklistItem]:
    return [item for item in items if item.person == person]


def completion_by_person(
    items: Sequence[ChecklistItem], people: Sequence[str]
) -> List[PersonProgress]:
    progress = []
    for person in people:
        owned = items_for_person(items, person)
        progress.append(
            PersonProgress(
                person=person,
                completed=sum(1 for item in owned if item.is_completed),
                total=len(owned),
            )
        )
    return progress
