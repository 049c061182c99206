from . import checklist, schedule

__all__ = ["checklist", "schedule"]
