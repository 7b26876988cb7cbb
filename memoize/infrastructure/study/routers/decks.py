"""API routes for deck management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from memoize.application.study.services import CardService, DeckService
from memoize.core import container
from memoize.exceptions import MemoizeError
from memoize.infrastructure.common.di import inject_service
from memoize.infrastructure.common.results import unwrap_or_raise
from memoize.infrastructure.identity.dependencies import CurrentIdentity
from memoize.infrastructure.study.schemas import (
    DeckCreateRequest,
    DeckCreateResponse,
    DeckDeleteResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
    DeckWithCount,
)
from memoize.infrastructure.study.schemas.converters import (
    deck_to_schema,
    deck_with_count_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=DecksListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    identity: CurrentIdentity,
    service: DeckService = Depends(inject_service(container.deck_service)),
) -> DecksListResponse:
    """
    List the caller's decks, newest first.

    Returns:
        Decks and their total
    """
    try:
        decks = unwrap_or_raise(service.list_decks(owner_id=identity.owner_id.value))
        return DecksListResponse(decks=[deck_to_schema(deck) for deck in decks], total=len(decks))
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=DeckCreateResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    identity: CurrentIdentity,
    service: DeckService = Depends(inject_service(container.deck_service)),
) -> DeckCreateResponse:
    """
    Create a deck owned by the caller.

    Args:
        request: Request containing name and optional description
        service: DeckService injected via dependency container

    Returns:
        Created deck

    Raises:
        HTTPException: If validation or creation fails
    """
    try:
        deck = unwrap_or_raise(
            service.create_deck(
                name=request.name,
                description=request.description,
                owner_id=identity.owner_id.value,
            )
        )
        return DeckCreateResponse(
            success=True,
            message="Deck created successfully",
            deck=deck_to_schema(deck),
        )
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{deck_id}", response_model=DeckWithCount, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: str,
    identity: CurrentIdentity,
    service: DeckService = Depends(inject_service(container.deck_service)),
    card_service: CardService = Depends(inject_service(container.card_service)),
) -> DeckWithCount:
    """
    Get one of the caller's decks with its card count.

    Raises:
        HTTPException: 404 if the deck is missing or owned by someone else
    """
    try:
        owner_id = identity.owner_id.value
        deck = unwrap_or_raise(service.get_deck(deck_id=deck_id, owner_id=owner_id))
        card_count = unwrap_or_raise(
            card_service.count_in_deck(deck_id=deck_id, owner_id=owner_id)
        )
        return deck_with_count_to_schema(deck, card_count)
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{deck_id}", response_model=DeckUpdateResponse, status_code=status.HTTP_200_OK)
def update_deck(
    deck_id: str,
    request: DeckUpdateRequest,
    identity: CurrentIdentity,
    service: DeckService = Depends(inject_service(container.deck_service)),
) -> DeckUpdateResponse:
    """
    Update a deck's name and/or description.

    Args:
        deck_id: ID of the deck to update
        request: Request containing the fields to change
        service: DeckService injected via dependency container

    Returns:
        Updated deck
    """
    try:
        deck = unwrap_or_raise(
            service.update_deck(
                deck_id=deck_id,
                owner_id=identity.owner_id.value,
                name=request.name,
                description=request.description,
            )
        )
        return DeckUpdateResponse(
            success=True,
            message="Deck updated successfully",
            deck=deck_to_schema(deck),
        )
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to update deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{deck_id}", response_model=DeckDeleteResponse, status_code=status.HTTP_200_OK)
def delete_deck(
    deck_id: str,
    identity: CurrentIdentity,
    service: DeckService = Depends(inject_service(container.deck_service)),
) -> DeckDeleteResponse:
    """
    Delete a deck and every card in it.

    A failed deletion can be retried; it resumes where it stopped.
    """
    try:
        unwrap_or_raise(service.delete_deck(deck_id=deck_id, owner_id=identity.owner_id.value))
        return DeckDeleteResponse(success=True, message="Deck deleted successfully")
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to delete deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
