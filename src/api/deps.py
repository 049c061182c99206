from fastapi import Request

from controller import ChecklistController, ScheduleController


def get_schedule_controller(request: Request) -> ScheduleController:
    return request.app.state.schedule_controller


def get_checklist_controller(request: Request) -> ChecklistController:
    return request.app.state.checklist_controller
