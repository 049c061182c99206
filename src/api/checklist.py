"""Endpoints for the per-person checklist."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from controller import ChecklistController, Notice
from models import ChecklistItem
from views import PersonProgress
from .deps import get_checklist_controller

router = APIRouter(prefix="/checklist", tags=["checklist"])

Controller = Annotated[ChecklistController, Depends(get_checklist_controller)]


class ChecklistView(BaseModel):
    ok: bool = True
    people: List[str]
    selected_person: str
    items: List[ChecklistItem]
    completed: int
    total: int
    is_busy: bool = False
    notices: List[Notice] = []


class ItemTitle(BaseModel):
    title: str


def render(controller: ChecklistController, ok: bool = True) -> ChecklistView:
    items = controller.filtered_items()
    return ChecklistView(
        ok=ok,
        people=controller.people,
        selected_person=controller.state.selected_person,
        items=items,
        completed=sum(1 for item in items if item.is_completed),
        total=len(items),
        is_busy=controller.state.is_busy,
        notices=controller.drain_notices(),
    )


@router.get("", response_model=ChecklistView)
async def get_checklist(controller: Controller) -> ChecklistView:
    return render(controller)


@router.post("/refresh", response_model=ChecklistView)
async def refresh_checklist(controller: Controller) -> ChecklistView:
    ok = await controller.refresh()
    return render(controller, ok)


@router.post("", response_model=ChecklistView)
async def create_item(body: ItemTitle, controller: Controller) -> ChecklistView:
    ok = await controller.create(body.title)
    return render(controller, ok)


@router.get("/stats", response_model=List[PersonProgress])
async def get_progress(controller: Controller) -> List[PersonProgress]:
    return controller.progress()


@router.put("/person/{person}", response_model=ChecklistView)
async def select_person(person: str, controller: Controller) -> ChecklistView:
    try:
        controller.select_person(person)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return render(controller)


@router.patch("/{item_id}", response_model=ChecklistView)
async def rename_item(item_id: int, body: ItemTitle, controller: Controller) -> ChecklistView:
    if controller.find(item_id) is None:
        raise HTTPException(status_code=404, detail="Checklist item not found")
    ok = await controller.rename(item_id, body.title)
    return render(controller, ok)


@router.post("/{item_id}/toggle", response_model=ChecklistView)
async def toggle_item(item_id: int, controller: Controller) -> ChecklistView:
    item = controller.find(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Checklist item not found")
    ok = await controller.toggle_complete(item)
    return render(controller, ok)


@router.delete("/{item_id}", response_model=ChecklistView)
async def delete_item(
    item_id: int,
    controller: Controller,
    confirm: Annotated[bool, Query(description="Explicit confirmation of the delete")] = False,
) -> ChecklistView:
    ok = await controller.remove(item_id, confirmed=confirm)
    return render(controller, ok)
