"""Repository for Card domain entities."""

from memoize.application.storage.protocols.record_store import RecordStoreProtocol
from memoize.domain.common.value_objects import CardId
from memoize.domain.study.entities.card import Card
from memoize.infrastructure.study.mappers.card_mapper import CardMapper

KEY_PREFIX = "card"


class CardRepository:
    """Repository for Card domain entities, one record per card."""

    def __init__(self, store: RecordStoreProtocol) -> None:
        self.store = store
        self.mapper = CardMapper()

    @staticmethod
    def key_for(card_id: CardId) -> str:
        return f"{KEY_PREFIX}:{card_id.value}"

    def find_by_id(self, card_id: CardId) -> Card | None:
        key = self.key_for(card_id)
        record = self.store.get(key)
        return self.mapper.to_domain(record, key=key) if record is not None else None

    def save(self, card: Card) -> Card:
        """Write the card record, replacing any previous version."""
        self.store.put(self.key_for(card.id), self.mapper.to_record(card))
        return card

    def delete(self, card_id: CardId) -> None:
        self.store.delete(self.key_for(card_id))
