"""Ordered deletion of a deck and everything that hangs off it."""

from collections.abc import Callable
from enum import StrEnum

import structlog

from memoize.application.common.errors import ServiceError
from memoize.application.common.result import Failure, Result, Success
from memoize.application.storage.exceptions import StoreError
from memoize.application.study.services.card_service import CardService
from memoize.domain.study.entities.deck import Deck

logger = structlog.get_logger(__name__)


class DeckDeletionStep(StrEnum):
    DELETE_CARDS = "delete_cards"
    REMOVE_DECK = "remove_deck"


class DeckDeletionCascade:
    """
    Deletes a deck in two steps, always in this order:

    1. every card of the deck, then the deck's card index
    2. the deck's owner-index entry and the deck record

    If step 1 fails, step 2 is not attempted and the deck stays visible
    with whatever cards remain. Running the deletion again picks up where
    it stopped.
    """

    def __init__(self, card_service: CardService) -> None:
        self.card_service = card_service

    def run(self, deck: Deck, remove_deck: Callable[[Deck], None]) -> Result[None, ServiceError]:
        """
        Run both steps for an already ownership-checked deck.

        Args:
            deck: Deck to delete
            remove_deck: Performs step 2; raises StoreError on failure

        Returns:
            Success(None), or the Failure of the step that stopped the cascade
        """
        log = logger.bind(deck_id=deck.id.value, owner_id=deck.owner_id.value)

        cards_result = self.card_service.delete_all_in_deck(deck.id.value, deck.owner_id.value)
        if cards_result.is_failure:
            error = cards_result.unwrap_error()
            log.warning(
                "deck_deletion_halted",
                step=DeckDeletionStep.DELETE_CARDS.value,
                error_kind=error.kind.value,
            )
            return Failure(error)
        cards_deleted = cards_result.unwrap()
        log.debug("deck_deletion_step_done", step=DeckDeletionStep.DELETE_CARDS.value)

        try:
            remove_deck(deck)
        except StoreError:
            log.exception("deck_deletion_halted", step=DeckDeletionStep.REMOVE_DECK.value)
            return Failure(ServiceError.store_failure())

        log.info("deleted_deck", cards_deleted=cards_deleted)
        return Success(None)
