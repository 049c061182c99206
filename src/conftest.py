import pytest

from controller import ChecklistController, ScheduleController
from repository import ChecklistRepository, ItineraryRepository
from test_utils.memory_store import InMemoryRecordStore

PEOPLE = ["성진", "지열", "성동"]


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def itinerary(store: InMemoryRecordStore) -> ItineraryRepository:
    return ItineraryRepository(store)


@pytest.fixture
def checklist(store: InMemoryRecordStore) -> ChecklistRepository:
    return ChecklistRepository(store, PEOPLE)


@pytest.fixture
def schedule_controller(itinerary: ItineraryRepository) -> ScheduleController:
    return ScheduleController(itinerary, trip_days=3)


@pytest.fixture
def checklist_controller(checklist: ChecklistRepository) -> ChecklistController:
    return ChecklistController(checklist)
