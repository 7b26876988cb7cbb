"""Protocol for Card record repository."""

from typing import Protocol

from memoize.domain.common.value_objects import CardId
from memoize.domain.study.entities.card import Card


class CardRepositoryProtocol(Protocol):
    def find_by_id(self, card_id: CardId) -> Card | None: ...

    def save(self, card: Card) -> Card: ...

    def delete(self, card_id: CardId) -> None: ...
