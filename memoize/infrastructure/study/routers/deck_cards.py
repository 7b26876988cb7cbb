"""API routes for the cards of a deck."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from memoize.application.study.services import CardService
from memoize.core import container
from memoize.exceptions import MemoizeError
from memoize.infrastructure.common.di import inject_service
from memoize.infrastructure.common.results import unwrap_or_raise
from memoize.infrastructure.identity.dependencies import CurrentIdentity
from memoize.infrastructure.study.schemas import (
    CardCreateRequest,
    CardCreateResponse,
    CardsListResponse,
)
from memoize.infrastructure.study.schemas.converters import card_to_schema, schedule_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["cards"])


@router.get("/{deck_id}/cards", response_model=CardsListResponse, status_code=status.HTTP_200_OK)
def list_cards(
    deck_id: str,
    identity: CurrentIdentity,
    service: CardService = Depends(inject_service(container.card_service)),
) -> CardsListResponse:
    """
    List the cards of one of the caller's decks, newest first.

    A deck that does not exist (or belongs to someone else) lists as empty.
    """
    try:
        cards = unwrap_or_raise(
            service.list_cards(deck_id=deck_id, owner_id=identity.owner_id.value)
        )
        return CardsListResponse(cards=[card_to_schema(card) for card in cards], total=len(cards))
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to list cards of deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{deck_id}/cards",
    response_model=CardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_card(
    deck_id: str,
    request: CardCreateRequest,
    identity: CurrentIdentity,
    service: CardService = Depends(inject_service(container.card_service)),
) -> CardCreateResponse:
    """
    Create a card in one of the caller's decks.

    Args:
        deck_id: ID of the deck
        request: Request containing front, back, tags and optional scheduling fields
        service: CardService injected via dependency container

    Returns:
        Created card

    Raises:
        HTTPException: 404 if the deck is missing or owned by someone else
    """
    try:
        card = unwrap_or_raise(
            service.create_card(
                deck_id=deck_id,
                owner_id=identity.owner_id.value,
                front=request.front,
                back=request.back,
                tags=request.tags,
                schedule=schedule_fields(request),  # type: ignore[arg-type]
            )
        )
        return CardCreateResponse(
            success=True,
            message="Card created successfully",
            card=card_to_schema(card),
        )
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to create card in deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
