"""FastAPI application for the trip planner."""

import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api import checklist, schedule
from config import Settings, get_settings
from controller import ChecklistController, ScheduleController
from record_store import RecordStoreClient
from repository import ChecklistRepository, ItineraryRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                },
            },
            "handlers": {
                "default": {
                    "formatter": "default",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"handlers": ["default"], "level": level},
            "loggers": {
                "httpx": {"level": "WARNING"},
                "uvicorn": {"level": "INFO"},
            },
        }
    )


def build_controllers(
    client: RecordStoreClient, settings: Settings
) -> tuple[ScheduleController, ChecklistController]:
    schedule_controller = ScheduleController(
        ItineraryRepository(client, table=settings.schedule_table),
        trip_days=settings.trip_days,
    )
    checklist_controller = ChecklistController(
        ChecklistRepository(client, settings.trip_people, table=settings.checklist_table)
    )
    return schedule_controller, checklist_controller


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.is_record_store_configured():
            logger.warning("Record store key is not set; requests will likely be rejected")

        async with RecordStoreClient(
            settings.record_store_url,
            settings.record_store_key,
            timeout=settings.request_timeout,
        ) as client:
            schedule_controller, checklist_controller = build_controllers(client, settings)
            app.state.schedule_controller = schedule_controller
            app.state.checklist_controller = checklist_controller

            await schedule_controller.refresh()
            await checklist_controller.refresh()
            logger.info(
                f"Loaded {len(schedule_controller.state.entries)} schedule entries and "
                f"{len(checklist_controller.state.items)} checklist items"
            )
            yield

    app = FastAPI(title="Trip Planner", lifespan=lifespan)
    app.include_router(schedule.router)
    app.include_router(checklist.router)
    return app


configure_logging(get_settings().log_level)
app = create_app()
