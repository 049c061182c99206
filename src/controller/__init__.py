from .checklist import ChecklistController
from .schedule import ScheduleController
from .state import ChecklistState, Notice, ViewMode, ViewState

__all__ = [
    "ChecklistController",
    "ChecklistState",
    "Notice",
    "ScheduleController",
    "ViewMode",
    "ViewState",
]
