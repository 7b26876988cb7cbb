"""Mapper for Deck record ↔ Domain conversion."""

from typing import Any

from memoize.application.storage.exceptions import CorruptRecordError
from memoize.domain.common.exceptions import DomainError
from memoize.domain.common.timestamps import from_millis, to_millis
from memoize.domain.common.value_objects import DeckId, OwnerId
from memoize.domain.study.entities.deck import Deck

# Raised while reading fields out of a malformed record
UNREADABLE_RECORD_ERRORS = (
    KeyError,
    TypeError,
    ValueError,
    AttributeError,
    OverflowError,
    DomainError,
)


class DeckMapper:
    """Mapper for Deck record ↔ Domain conversion."""

    def to_domain(self, record: Any, key: str | None = None) -> Deck:  # noqa: ANN401
        """
        Convert a stored record to a domain entity.

        Raises:
            CorruptRecordError: If the record is missing fields or holds invalid values
        """
        try:
            return Deck.create_with_id(
                id=DeckId(record["id"]),
                owner_id=OwnerId(record["owner_id"]),
                name=record["name"],
                description=record["description"],
                created_at=from_millis(record["created_at"]),
            )
        except UNREADABLE_RECORD_ERRORS as e:
            raise CorruptRecordError("Stored deck record is unreadable", key=key) from e

    def to_record(self, deck: Deck) -> dict[str, Any]:
        """Convert a domain entity to its stored shape."""
        return {
            "id": deck.id.value,
            "name": deck.name,
            "description": deck.description,
            "created_at": to_millis(deck.created_at),
            "owner_id": deck.owner_id.value,
        }
