"""API routes for card management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from memoize.application.study.dtos import CONTENT_FIELDS, SCHEDULE_FIELDS
from memoize.application.study.services import CardService
from memoize.core import container
from memoize.exceptions import MemoizeError
from memoize.infrastructure.common.di import inject_service
from memoize.infrastructure.common.results import unwrap_or_raise
from memoize.infrastructure.identity.dependencies import CurrentIdentity
from memoize.infrastructure.study.schemas import (
    Card,
    CardDeleteResponse,
    CardUpdateRequest,
    CardUpdateResponse,
)
from memoize.infrastructure.study.schemas.converters import card_to_schema, supplied_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("/{card_id}", response_model=Card, status_code=status.HTTP_200_OK)
def get_card(
    card_id: str,
    identity: CurrentIdentity,
    service: CardService = Depends(inject_service(container.card_service)),
) -> Card:
    try:
        card = unwrap_or_raise(service.get_card(card_id=card_id, owner_id=identity.owner_id.value))
        return card_to_schema(card)
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to get card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{card_id}", response_model=CardUpdateResponse, status_code=status.HTTP_200_OK)
def update_card(
    card_id: str,
    request: CardUpdateRequest,
    identity: CurrentIdentity,
    service: CardService = Depends(inject_service(container.card_service)),
) -> CardUpdateResponse:
    """
    Update a card's content and/or scheduling fields.

    Clients persist review progress through this route.

    Args:
        card_id: ID of the card to update
        request: Request containing the fields to change
        service: CardService injected via dependency container

    Returns:
        Updated card
    """
    try:
        changes = supplied_fields(request, CONTENT_FIELDS | SCHEDULE_FIELDS)
        card = unwrap_or_raise(
            service.update_card(
                card_id=card_id,
                owner_id=identity.owner_id.value,
                changes=changes,  # type: ignore[arg-type]
            )
        )
        return CardUpdateResponse(
            success=True,
            message="Card updated successfully",
            card=card_to_schema(card),
        )
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to update card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{card_id}", response_model=CardDeleteResponse, status_code=status.HTTP_200_OK)
def delete_card(
    card_id: str,
    identity: CurrentIdentity,
    service: CardService = Depends(inject_service(container.card_service)),
) -> CardDeleteResponse:
    """Delete a card and remove it from its deck."""
    try:
        unwrap_or_raise(service.delete_card(card_id=card_id, owner_id=identity.owner_id.value))
        return CardDeleteResponse(success=True, message="Card deleted successfully")
    except (MemoizeError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to delete card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
