"""Owner-scoped card operations."""

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

import structlog

from memoize.application.common.errors import ServiceError, store_errors_as_failure
from memoize.application.common.result import Failure, Result, Success
from memoize.application.storage.protocols.id_generator import IdGeneratorProtocol
from memoize.application.storage.services.index_maintainer import IndexMaintainer
from memoize.application.study.dtos import SCHEDULE_FIELDS, CardChanges, ScheduleFields
from memoize.application.study.protocols.card_repository import CardRepositoryProtocol
from memoize.application.study.protocols.deck_repository import DeckRepositoryProtocol
from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.timestamps import truncate_to_millis, utcnow
from memoize.domain.common.value_objects import CardId, DeckId, OwnerId
from memoize.domain.study.entities.card import Card
from memoize.domain.study.entities.deck import Deck
from memoize.domain.study.value_objects.schedule import Schedule

logger = structlog.get_logger(__name__)


def _schedule_changes(fields: Mapping[str, Any]) -> dict[str, Any]:
    changes = {name: fields[name] for name in SCHEDULE_FIELDS if name in fields}
    for name in ("due", "last_review"):
        if isinstance(changes.get(name), datetime):
            changes[name] = truncate_to_millis(changes[name])
    return changes


class CardService:
    """
    Create, read, list, update and delete cards on behalf of an owner.

    Cards are reachable through their deck's card index; the index holds
    card ids only and is kept in step with the card records here.
    """

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        deck_index: IndexMaintainer,
        id_generator: IdGeneratorProtocol,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize service with its store-backed collaborators."""
        self.card_repository = card_repository
        self.deck_repository = deck_repository
        self.deck_index = deck_index
        self.id_generator = id_generator
        self.clock = clock

    def _find_owned_deck(self, deck_id: str, owner_id: str) -> Deck | None:
        if not deck_id:
            return None
        deck = self.deck_repository.find_by_id(DeckId(deck_id))
        if deck is None or not deck.is_owned_by(OwnerId(owner_id)):
            return None
        return deck

    def _find_owned_card(self, card_id: str, owner_id: str) -> Card | None:
        if not card_id:
            return None
        card = self.card_repository.find_by_id(CardId(card_id))
        if card is None or not card.is_owned_by(OwnerId(owner_id)):
            return None
        return card

    @store_errors_as_failure("create_card")
    def create_card(
        self,
        deck_id: str,
        owner_id: str,
        front: str,
        back: str,
        tags: list[str] | None = None,
        schedule: ScheduleFields | None = None,
    ) -> Result[Card, ServiceError]:
        """
        Create a card in one of the owner's decks.

        Args:
            deck_id: Deck that will hold the card; must be owned by owner_id
            owner_id: Authenticated owner
            front: Front side text
            back: Back side text
            tags: Optional ordered tags
            schedule: Scheduling values; missing ones start as a new card due now

        Returns:
            Success with the card, or Failure(NOT_FOUND / VALIDATION_FAILED / STORE_FAILURE)
        """
        deck = self._find_owned_deck(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))

        now = truncate_to_millis(self.clock())
        try:
            card_schedule = replace(Schedule.initial(due=now), **_schedule_changes(schedule or {}))
            card = Card.create(
                id=CardId(self.id_generator.new_id()),
                deck_id=deck.id,
                owner_id=deck.owner_id,
                front=front,
                back=back,
                schedule=card_schedule,
                created_at=now,
                tags=tags,
            )
        except ValidationError as e:
            return Failure(ServiceError.validation(e.message))

        # The record must exist before the index references it.
        self.card_repository.save(card)
        self.deck_index.add(deck.id.value, card.id.value)

        logger.info("created_card", card_id=card.id.value, deck_id=deck_id)
        return Success(card)

    @store_errors_as_failure("get_card")
    def get_card(self, card_id: str, owner_id: str) -> Result[Card, ServiceError]:
        card = self._find_owned_card(card_id, owner_id)
        if card is None:
            return Failure(ServiceError.not_found("Card"))
        return Success(card)

    @store_errors_as_failure("list_cards")
    def list_cards(self, deck_id: str, owner_id: str) -> Result[list[Card], ServiceError]:
        """
        List the cards of a deck, newest first.

        A deck that is missing or owned by someone else lists as empty.
        Index entries that no longer resolve to a card of this deck and
        owner are skipped.
        """
        deck = self._find_owned_deck(deck_id, owner_id)
        if deck is None:
            return Success([])

        cards: list[Card] = []
        for card_id in reversed(self.deck_index.read(deck.id.value)):
            card = self.card_repository.find_by_id(CardId(card_id))
            if card is None or card.deck_id != deck.id or not card.is_owned_by(deck.owner_id):
                continue
            cards.append(card)

        cards.sort(key=lambda card: card.created_at, reverse=True)
        return Success(cards)

    @store_errors_as_failure("count_cards")
    def count_in_deck(self, deck_id: str, owner_id: str) -> Result[int, ServiceError]:
        """Number of ids in the deck's card index."""
        deck = self._find_owned_deck(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))
        return Success(len(self.deck_index.read(deck.id.value)))

    @store_errors_as_failure("update_card")
    def update_card(
        self, card_id: str, owner_id: str, changes: CardChanges
    ) -> Result[Card, ServiceError]:
        """
        Change a card's content and/or scheduling fields.

        Keys absent from ``changes`` stay unchanged; a None front, back or
        tags is treated as absent. ``last_review`` may be set to None.
        Nothing is written unless every change is valid.
        """
        card = self._find_owned_card(card_id, owner_id)
        if card is None:
            return Failure(ServiceError.not_found("Card"))

        try:
            if changes.get("front") is not None:
                card.update_front(changes["front"])
            if changes.get("back") is not None:
                card.update_back(changes["back"])
            if changes.get("tags") is not None:
                card.replace_tags(changes["tags"])
            schedule_changes = _schedule_changes(changes)
            if schedule_changes:
                card.reschedule(**schedule_changes)
        except ValidationError as e:
            return Failure(ServiceError.validation(e.message))

        self.card_repository.save(card)

        logger.info("updated_card", card_id=card_id)
        return Success(card)

    @store_errors_as_failure("delete_card")
    def delete_card(self, card_id: str, owner_id: str) -> Result[None, ServiceError]:
        """Delete a card and drop it from its deck's index."""
        card = self._find_owned_card(card_id, owner_id)
        if card is None:
            return Failure(ServiceError.not_found("Card"))

        self.deck_index.remove(card.deck_id.value, card.id.value)
        self.card_repository.delete(card.id)

        logger.info("deleted_card", card_id=card_id)
        return Success(None)

    @store_errors_as_failure("delete_all_in_deck")
    def delete_all_in_deck(self, deck_id: str, owner_id: str) -> Result[int, ServiceError]:
        """
        Delete every card listed in a deck's index, then the index itself.

        Only the deck deletion cascade calls this. Ids whose card is
        already gone are skipped, so a repeated call finishes the work of
        an interrupted one.

        Returns:
            Success with the number of card records deleted
        """
        deck = self._find_owned_deck(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))

        deleted = 0
        for card_id in self.deck_index.read(deck.id.value):
            card = self.card_repository.find_by_id(CardId(card_id))
            if card is None:
                continue
            if card.deck_id != deck.id or not card.is_owned_by(deck.owner_id):
                logger.warning("foreign_card_in_deck_index", card_id=card_id, deck_id=deck_id)
                continue
            self.card_repository.delete(card.id)
            deleted += 1

        self.deck_index.clear(deck.id.value)

        logger.info("deleted_cards_in_deck", deck_id=deck_id, count=deleted)
        return Success(deleted)
