"""
Card entity for spaced repetition study.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from memoize.domain.common.entity import Entity
from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.value_objects import CardId, DeckId, OwnerId
from memoize.domain.study.value_objects.schedule import Schedule


def _check_side(value: object, side: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Card {side} cannot be empty", field=side, value=value)
    return value


def _check_tags(tags: object) -> list[str]:
    if not isinstance(tags, list | tuple) or not all(isinstance(tag, str) for tag in tags):
        raise ValidationError("Tags must be a list of strings", field="tags", value=tags)
    return list(tags)


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Flashcard belonging to exactly one deck.

    Business Rules:
    - Front and back cannot be empty
    - Tags are an ordered list of strings, possibly empty
    - id, deck_id, owner_id and created_at never change after creation
    """

    # Identity
    id: CardId
    deck_id: DeckId
    owner_id: OwnerId

    # Content
    front: str
    back: str
    schedule: Schedule
    created_at: datetime
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_side(self.front, "front")
        _check_side(self.back, "back")
        self.tags = _check_tags(self.tags)

    def is_owned_by(self, owner_id: OwnerId) -> bool:
        """Check whether the card belongs to the given owner."""
        return self.owner_id == owner_id

    def update_front(self, front: str) -> None:
        """
        Update the front side.

        Raises:
            ValidationError: If front is empty
        """
        self.front = _check_side(front, "front")

    def update_back(self, back: str) -> None:
        """
        Update the back side.

        Raises:
            ValidationError: If back is empty
        """
        self.back = _check_side(back, "back")

    def replace_tags(self, tags: list[str]) -> None:
        self.tags = _check_tags(tags)

    def reschedule(self, **changes: Any) -> None:
        """
        Replace some scheduling fields, keeping the others.

        Raises:
            ValidationError: If the resulting schedule is invalid
        """
        self.schedule = replace(self.schedule, **changes)

    @classmethod
    def create(
        cls,
        id: CardId,
        deck_id: DeckId,
        owner_id: OwnerId,
        front: str,
        back: str,
        schedule: Schedule,
        created_at: datetime,
        tags: list[str] | None = None,
    ) -> "Card":
        """Create a new card from user input."""
        return cls(
            id=id,
            deck_id=deck_id,
            owner_id=owner_id,
            front=_check_side(front, "front"),
            back=_check_side(back, "back"),
            schedule=schedule,
            created_at=created_at,
            tags=tags if tags is not None else [],
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        deck_id: DeckId,
        owner_id: OwnerId,
        front: str,
        back: str,
        schedule: Schedule,
        created_at: datetime,
        tags: list[str],
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            owner_id=owner_id,
            front=front,
            back=back,
            schedule=schedule,
            created_at=created_at,
            tags=tags,
        )
