from .schedule import CardState, Schedule

__all__ = ["CardState", "Schedule"]
