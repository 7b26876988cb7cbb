"""Field bundles accepted by the card service."""

from datetime import datetime
from typing import TypedDict

SCHEDULE_FIELDS = frozenset(
    {"state", "stability", "difficulty", "due", "last_review", "reps", "lapses"}
)
CONTENT_FIELDS = frozenset({"front", "back", "tags"})


class ScheduleFields(TypedDict, total=False):
    """Scheduling values supplied on create; missing ones take initial values."""

    state: int
    stability: float
    difficulty: float
    due: datetime
    last_review: datetime | None
    reps: int
    lapses: int


class CardChanges(ScheduleFields, total=False):
    """Fields a card update may change. Absent keys stay unchanged."""

    front: str
    back: str
    tags: list[str]
