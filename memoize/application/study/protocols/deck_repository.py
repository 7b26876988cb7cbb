"""Protocol for Deck record repository."""

from typing import Protocol

from memoize.domain.common.value_objects import DeckId
from memoize.domain.study.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """
    Protocol for reading and writing single deck records.

    Ownership is not checked here; services check it on the value read.
    """

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        """
        Find a deck by ID.

        Returns:
            Deck entity, or None if no record exists

        Raises:
            StoreError: If the store failed or the record is unreadable
        """
        ...

    def save(self, deck: Deck) -> Deck:
        """Write the deck record, replacing any previous version."""
        ...

    def delete(self, deck_id: DeckId) -> None:
        """Delete the deck record. Deleting a missing record is a no-op."""
        ...
