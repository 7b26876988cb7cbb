"""Owner-scoped deck operations."""

from collections.abc import Callable
from datetime import datetime

import structlog

from memoize.application.common.errors import ServiceError, store_errors_as_failure
from memoize.application.common.result import Failure, Result, Success
from memoize.application.storage.protocols.id_generator import IdGeneratorProtocol
from memoize.application.storage.services.index_maintainer import IndexMaintainer
from memoize.application.study.protocols.deck_repository import DeckRepositoryProtocol
from memoize.application.study.services.deck_deletion_cascade import DeckDeletionCascade
from memoize.domain.common.exceptions import ValidationError
from memoize.domain.common.timestamps import truncate_to_millis, utcnow
from memoize.domain.common.value_objects import DeckId, OwnerId
from memoize.domain.study.entities.deck import Deck

logger = structlog.get_logger(__name__)


class DeckService:
    """
    Create, read, list, update and delete decks on behalf of an owner.

    A deck owned by someone else is reported exactly like a deck that
    does not exist.
    """

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        owner_index: IndexMaintainer,
        id_generator: IdGeneratorProtocol,
        deletion_cascade: DeckDeletionCascade,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize service with its store-backed collaborators."""
        self.deck_repository = deck_repository
        self.owner_index = owner_index
        self.id_generator = id_generator
        self.deletion_cascade = deletion_cascade
        self.clock = clock

    def _find_owned(self, deck_id: str, owner_id: str) -> Deck | None:
        if not deck_id:
            return None
        deck = self.deck_repository.find_by_id(DeckId(deck_id))
        if deck is None or not deck.is_owned_by(OwnerId(owner_id)):
            return None
        return deck

    @store_errors_as_failure("create_deck")
    def create_deck(
        self, name: str, description: str | None, owner_id: str
    ) -> Result[Deck, ServiceError]:
        """
        Create a deck and add it to the owner's index.

        Args:
            name: Deck name, must not be empty
            description: Optional description, stored as "" when missing
            owner_id: Authenticated owner

        Returns:
            Success with the new deck, or Failure(VALIDATION_FAILED / STORE_FAILURE)
        """
        try:
            deck = Deck.create(
                id=DeckId(self.id_generator.new_id()),
                owner_id=OwnerId(owner_id),
                name=name,
                description=description,
                created_at=truncate_to_millis(self.clock()),
            )
        except ValidationError as e:
            return Failure(ServiceError.validation(e.message))

        # The record must exist before the index references it.
        self.deck_repository.save(deck)
        self.owner_index.add(owner_id, deck.id.value)

        logger.info("created_deck", deck_id=deck.id.value, owner_id=owner_id)
        return Success(deck)

    @store_errors_as_failure("get_deck")
    def get_deck(self, deck_id: str, owner_id: str) -> Result[Deck, ServiceError]:
        deck = self._find_owned(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))
        return Success(deck)

    @store_errors_as_failure("list_decks")
    def list_decks(self, owner_id: str) -> Result[list[Deck], ServiceError]:
        """
        List the owner's decks, newest first.

        Index entries that no longer resolve to a deck of this owner are
        skipped. Decks with equal timestamps keep most-recently-indexed first.
        """
        owner = OwnerId(owner_id)
        decks: list[Deck] = []
        for deck_id in reversed(self.owner_index.read(owner_id)):
            deck = self.deck_repository.find_by_id(DeckId(deck_id))
            if deck is None or not deck.is_owned_by(owner):
                continue
            decks.append(deck)

        decks.sort(key=lambda deck: deck.created_at, reverse=True)
        return Success(decks)

    @store_errors_as_failure("update_deck")
    def update_deck(
        self,
        deck_id: str,
        owner_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> Result[Deck, ServiceError]:
        """
        Change a deck's name and/or description.

        None leaves a field unchanged. Nothing is written unless every
        change is valid.
        """
        deck = self._find_owned(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))

        try:
            if name is not None:
                deck.rename(name)
            if description is not None:
                deck.update_description(description)
        except ValidationError as e:
            return Failure(ServiceError.validation(e.message))

        self.deck_repository.save(deck)

        logger.info("updated_deck", deck_id=deck_id)
        return Success(deck)

    @store_errors_as_failure("delete_deck")
    def delete_deck(self, deck_id: str, owner_id: str) -> Result[None, ServiceError]:
        """
        Delete a deck together with all of its cards.

        Returns:
            Success(None), Failure(NOT_FOUND) when the deck is missing or
            foreign, or Failure(STORE_FAILURE) when the cascade stopped
            part-way; repeating the call resumes it.
        """
        deck = self._find_owned(deck_id, owner_id)
        if deck is None:
            return Failure(ServiceError.not_found("Deck"))
        return self.deletion_cascade.run(deck, self.remove_deck)

    def remove_deck(self, deck: Deck) -> None:
        """
        Remove the deck's owner-index entry and then its record.

        Cards are not touched; callers run this only after the deck's cards
        are gone.

        Raises:
            StoreError: If either write fails
        """
        self.owner_index.remove(deck.owner_id.value, deck.id.value)
        self.deck_repository.delete(deck.id)
