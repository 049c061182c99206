"""Per-person checklist model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Column, DateTime, Field, SQLModel


class ChecklistItem(SQLModel, table=True):
    """A to-do line owned by one of the travellers."""

    __tablename__: str = "checklist"

    id: Optional[int] = Field(default=None, primary_key=True)
    person: str = Field(max_length=50, index=True)
    title: str = Field(max_length=255)
    is_completed: bool = Field(default=False)
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
