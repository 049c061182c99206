from .checklist import ChecklistItem
from .schedule import (
    Category,
    ScheduleEntry,
    ScheduleFields,
    ScheduleUpdate,
)

__all__ = [
    "Category",
    "ChecklistItem",
    "ScheduleEntry",
    "ScheduleFields",
    "ScheduleUpdate",
]
