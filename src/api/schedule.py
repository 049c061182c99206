"""Endpoints for the itinerary timeline, calendar, map and edit forms."""

from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from controller import Notice, ScheduleController, ViewMode
from models import ScheduleEntry, ScheduleFields
from repository import StoreUnavailable
from views import DaySchedule, MapMarker
from .deps import get_schedule_controller

router = APIRouter(prefix="/schedule", tags=["schedule"])

Controller = Annotated[ScheduleController, Depends(get_schedule_controller)]


class ScheduleView(BaseModel):
    ok: bool = True
    selected_day: int
    view_mode: ViewMode
    days: List[int]
    entries: List[ScheduleEntry]
    editing_id: Optional[int] = None
    edit_buffer: Dict[str, Any] = {}
    is_busy: bool = False
    notices: List[Notice] = []


def render(controller: ScheduleController, ok: bool = True) -> ScheduleView:
    """Timeline view of the current state. Pending notices are drained."""
    state = controller.state
    return ScheduleView(
        ok=ok,
        selected_day=state.selected_day,
        view_mode=state.view_mode,
        days=controller.available_days(),
        entries=controller.filtered_entries(),
        editing_id=state.editing_id,
        edit_buffer=state.edit_buffer,
        is_busy=state.is_busy,
        notices=controller.drain_notices(),
    )


@router.get("", response_model=ScheduleView)
async def get_schedule(controller: Controller) -> ScheduleView:
    return render(controller)


@router.post("/refresh", response_model=ScheduleView)
async def refresh_schedule(controller: Controller) -> ScheduleView:
    ok = await controller.refresh()
    return render(controller, ok)


@router.post("", response_model=ScheduleView)
async def create_entry(fields: ScheduleFields, controller: Controller) -> ScheduleView:
    ok = await controller.create(fields)
    return render(controller, ok)


@router.put("/day/{day}", response_model=ScheduleView)
async def select_day(
    day: Annotated[int, Path(ge=1, description="Trip day to show")],
    controller: Controller,
) -> ScheduleView:
    controller.select_day(day)
    return render(controller)


@router.put("/mode/{mode}", response_model=ScheduleView)
async def set_view_mode(mode: ViewMode, controller: Controller) -> ScheduleView:
    controller.set_view_mode(mode)
    return render(controller)


@router.get("/calendar", response_model=List[DaySchedule])
async def get_calendar(controller: Controller) -> List[DaySchedule]:
    return controller.calendar()


@router.get("/map", response_model=List[MapMarker])
async def get_map(
    controller: Controller,
    all_days: Annotated[bool, Query(description="Show every day, not just the selected one")] = True,
) -> List[MapMarker]:
    return controller.map_markers(all_days=all_days)


@router.get("/stats")
async def get_stats(controller: Controller) -> Dict[int, Dict[str, int]]:
    """Entry counts per category for each day."""
    return controller.category_stats()


# Edit session routes come before "/{entry_id}" so "edit" is not read as an id.


@router.patch("/edit", response_model=ScheduleView)
async def change_edit_buffer(
    controller: Controller,
    fields: Annotated[Dict[str, Any], Body()],
) -> ScheduleView:
    if controller.state.editing_id is None:
        raise HTTPException(status_code=409, detail="No entry is being edited")
    try:
        ok = controller.update_edit_buffer(**fields)
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return render(controller, ok)


@router.post("/edit/commit", response_model=ScheduleView)
async def commit_edit(controller: Controller) -> ScheduleView:
    if controller.state.editing_id is None:
        raise HTTPException(status_code=409, detail="No entry is being edited")
    ok = await controller.commit_edit()
    return render(controller, ok)


@router.delete("/edit", response_model=ScheduleView)
async def cancel_edit(controller: Controller) -> ScheduleView:
    ok = controller.cancel_edit()
    return render(controller, ok)


@router.post("/{entry_id}/edit", response_model=ScheduleView)
async def begin_edit(entry_id: int, controller: Controller) -> ScheduleView:
    entry = controller.find(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Schedule entry not found")
    ok = controller.begin_edit(entry)
    return render(controller, ok)


@router.get("/{entry_id}", response_model=ScheduleEntry)
async def get_entry(entry_id: int, controller: Controller) -> ScheduleEntry:
    """Read one entry straight from the record store."""
    try:
        entry = await controller.repository.get(entry_id)
    except StoreUnavailable:
        raise HTTPException(status_code=503, detail="Record store unavailable")
    if entry is None:
        raise HTTPException(status_code=404, detail="Schedule entry not found")
    return entry


@router.delete("/{entry_id}", response_model=ScheduleView)
async def delete_entry(
    entry_id: int,
    controller: Controller,
    confirm: Annotated[bool, Query(description="Explicit confirmation of the delete")] = False,
) -> ScheduleView:
    ok = await controller.remove(entry_id, confirmed=confirm)
    return render(controller, ok)
