from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from models import ChecklistItem, ScheduleEntry


class ViewMode(str, Enum):
    timeline = "timeline"
    calendar = "calendar"
    map = "map"
    checklist = "checklist"


class Notice(BaseModel):
    """A message for the user, shown once."""

    level: Literal["info", "error"] = "info"
    text: str


class ViewState(BaseModel):
    """In-memory snapshot of the itinerary plus the current UI selection."""

    entries: List[ScheduleEntry] = Field(default_factory=list)
    selected_day: int = 1
    view_mode: ViewMode = ViewMode.timeline
    # At most one entry is edited at a time
    editing_id: Optional[int] = None
    edit_buffer: dict = Field(default_factory=dict)
    is_busy: bool = False
    notices: List[Notice] = Field(default_factory=list)


class ChecklistState(BaseModel):
    items: List[ChecklistItem] = Field(default_factory=list)
    selected_person: str
    is_busy: bool = False
    notices: List[Notice] = Field(default_factory=list)
