"""Mapper for Card record ↔ Domain conversion."""

from typing import Any

from memoize.application.storage.exceptions import CorruptRecordError
from memoize.domain.common.timestamps import from_millis, to_millis
from memoize.domain.common.value_objects import CardId, DeckId, OwnerId
from memoize.domain.study.entities.card import Card
from memoize.domain.study.value_objects.schedule import Schedule
from memoize.infrastructure.study.mappers.deck_mapper import UNREADABLE_RECORD_ERRORS


class CardMapper:
    """Mapper for Card record ↔ Domain conversion."""

    def to_domain(self, record: Any, key: str | None = None) -> Card:  # noqa: ANN401
        """
        Convert a stored record to a domain entity.

        Raises:
            CorruptRecordError: If the record is missing fields or holds invalid values
        """
        try:
            last_review = record["last_review"]
            schedule = Schedule(
                state=record["state"],
                stability=record["stability"],
                difficulty=record["difficulty"],
                due=from_millis(record["due"]),
                last_review=from_millis(last_review) if last_review is not None else None,
                reps=record["reps"],
                lapses=record["lapses"],
            )
            return Card.create_with_id(
                id=CardId(record["id"]),
                deck_id=DeckId(record["deck_id"]),
                owner_id=OwnerId(record["owner_id"]),
                front=record["front"],
                back=record["back"],
                schedule=schedule,
                created_at=from_millis(record["created_at"]),
                tags=record["tags"],
            )
        except UNREADABLE_RECORD_ERRORS as e:
            raise CorruptRecordError("Stored card record is unreadable", key=key) from e

    def to_record(self, card: Card) -> dict[str, Any]:
        """Convert a domain entity to its stored shape."""
        schedule = card.schedule
        last_review = schedule.last_review
        return {
            "id": card.id.value,
            "deck_id": card.deck_id.value,
            "front": card.front,
            "back": card.back,
            "tags": list(card.tags),
            "state": int(schedule.state),
            "stability": schedule.stability,
            "difficulty": schedule.difficulty,
            "due": to_millis(schedule.due),
            "last_review": to_millis(last_review) if last_review is not None else None,
            "reps": schedule.reps,
            "lapses": schedule.lapses,
            "created_at": to_millis(card.created_at),
            "owner_id": card.owner_id.value,
        }
