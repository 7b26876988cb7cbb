"""
Scheduling state carried by a card.

The values are produced by a scheduler running elsewhere (FSRS on the
client). They are checked against their domains and otherwise kept
exactly as given.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.value_object import ValueObject

MIN_DIFFICULTY = 0.0
MAX_DIFFICULTY = 10.0


class CardState(IntEnum):
    """Learning state of a card."""

    NEW = 0
    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


@dataclass(frozen=True)
class Schedule(ValueObject):
    """
    Opaque scheduling fields of a card.

    Business Rules:
    - state is one of CardState
    - stability and difficulty are finite
    - stability is non-negative
    - difficulty lies within [MIN_DIFFICULTY, MAX_DIFFICULTY]
    - reps and lapses are non-negative integers
    """

    state: CardState
    stability: float
    difficulty: float
    due: datetime
    last_review: datetime | None = None
    reps: int = 0
    lapses: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        try:
            object.__setattr__(self, "state", CardState(self.state))
        except ValueError:
            raise ValidationError("Unknown card state", field="state", value=self.state) from None

        if isinstance(self.stability, bool) or not isinstance(self.stability, int | float):
            raise ValidationError("Stability must be a number", field="stability")
        if isinstance(self.stability, float) and not math.isfinite(self.stability):
            raise ValidationError(
                "Stability must be finite", field="stability", value=self.stability
            )
        if self.stability < 0:
            raise ValidationError(
                "Stability cannot be negative", field="stability", value=self.stability
            )

        if isinstance(self.difficulty, bool) or not isinstance(self.difficulty, int | float):
            raise ValidationError("Difficulty must be a number", field="difficulty")
        if isinstance(self.difficulty, float) and not math.isfinite(self.difficulty):
            raise ValidationError(
                "Difficulty must be finite", field="difficulty", value=self.difficulty
            )
        if not MIN_DIFFICULTY <= self.difficulty <= MAX_DIFFICULTY:
            raise ValidationError(
                f"Difficulty must be between {MIN_DIFFICULTY:g} and {MAX_DIFFICULTY:g}",
                field="difficulty",
                value=self.difficulty,
            )

        for name in ("reps", "lapses"):
            count = getattr(self, name)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValidationError(
                    f"{name} must be a non-negative integer", field=name, value=count
                )

    @classmethod
    def initial(cls, due: datetime) -> "Schedule":
        """Schedule of a card that has never been reviewed."""
        return cls(
            state=CardState.NEW,
            stability=0.0,
            difficulty=0.0,
            due=due,
            last_review=None,
            reps=0,
            lapses=0,
        )
