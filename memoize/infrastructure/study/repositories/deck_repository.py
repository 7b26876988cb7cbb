"""Repository for Deck domain entities."""

from memoize.application.storage.protocols.record_store import RecordStoreProtocol
from memoize.domain.common.value_objects import DeckId
from memoize.domain.study.entities.deck import Deck
from memoize.infrastructure.study.mappers.deck_mapper import DeckMapper

KEY_PREFIX = "deck"


class DeckRepository:
    """Repository for Deck domain entities, one record per deck."""

    def __init__(self, store: RecordStoreProtocol) -> None:
        self.store = store
        self.mapper = DeckMapper()

    @staticmethod
    def key_for(deck_id: DeckId) -> str:
        return f"{KEY_PREFIX}:{deck_id.value}"

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        """
        Find a deck by ID.

        Args:
            deck_id: The deck ID

        Returns:
            Deck entity if a record exists, None otherwise
        """
        key = self.key_for(deck_id)
        record = self.store.get(key)
        return self.mapper.to_domain(record, key=key) if record is not None else None

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or replace).

        Args:
            deck: The deck entity to save

        Returns:
            The saved deck entity
        """
        self.store.put(self.key_for(deck.id), self.mapper.to_record(deck))
        return deck

    def delete(self, deck_id: DeckId) -> None:
        self.store.delete(self.key_for(deck_id))
