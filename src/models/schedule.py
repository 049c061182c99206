"""Schedule entry model and the form fields used to create or change one."""

from datetime import datetime
from datetime import time as TimeOfDay
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator
from sqlalchemy import func
from sqlmodel import Column, DateTime, Field, SQLModel, String, Text


class Category(str, Enum):
    sightseeing = "sightseeing"
    meal = "meal"
    shopping = "shopping"
    transit = "transit"


# Labels written by the first version of the app
CATEGORY_ALIASES = {
    "관광": Category.sightseeing,
    "식사": Category.meal,
    "쇼핑": Category.shopping,
    "이동": Category.transit,
}


def parse_category(value: Any) -> Any:
    """Map blank values to the default category and legacy labels to their category."""
    if value is None:
        return Category.sightseeing
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Category.sightseeing
        return CATEGORY_ALIASES.get(value, value.lower())
    return value


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class ScheduleEntry(SQLModel, table=True):
    """A single itinerary item, as stored in the record store."""

    __tablename__: str = "travel_schedule"

    id: Optional[int] = Field(default=None, primary_key=True)
    day: int = Field(index=True, ge=1)
    time: TimeOfDay
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    category: Category = Field(
        default=Category.sightseeing,
        sa_column=Column(String(20), nullable=False, server_default="sightseeing"),
    )
    location: Optional[str] = Field(default=None, max_length=255)
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Any:
        return parse_category(value)

    @field_validator("description", "location", mode="before")
    @classmethod
    def normalize_optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    def editable_fields(self) -> dict:
        """The fields an update replaces, in form representation."""
        return {
            "day": self.day,
            "time": self.time.strftime("%H:%M"),
            "title": self.title,
            "description": self.description or "",
            "category": self.category.value,
            "location": self.location or "",
        }


class ScheduleFields(BaseModel):
    """Fields submitted by the create form."""

    day: int = 1
    time: Optional[TimeOfDay] = None
    title: str = ""
    description: Optional[str] = None
    category: Category = Category.sightseeing
    location: Optional[str] = None

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: int) -> int:
        if value < 1:
            raise ValueError("day must be 1 or greater")
        return value

    @field_validator("time", "description", "location", mode="before")
    @classmethod
    def normalize_optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Any:
        return parse_category(value)

    def missing_required(self) -> list[str]:
        missing = []
        if self.time is None:
            missing.append("time")
        if not self.title:
            missing.append("title")
        return missing


class ScheduleUpdate(ScheduleFields):
    """
    Fields of a partial update.

    Only fields explicitly given are sent; required fields that are given
    must still be non-blank.
    """

    def missing_required(self) -> list[str]:
        missing = []
        if "time" in self.model_fields_set and self.time is None:
            missing.append("time")
        if "title" in self.model_fields_set and not self.title:
            missing.append("title")
        return missing

    def changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
