from .checklist import ChecklistRepository
from .errors import NotFound, StoreUnavailable, TripPlannerError, ValidationError
from .schedule import ItineraryRepository

__all__ = [
    "ChecklistRepository",
    "ItineraryRepository",
    "NotFound",
    "StoreUnavailable",
    "TripPlannerError",
    "ValidationError",
]
