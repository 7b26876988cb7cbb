"""Study context schemas."""

from .card_schemas import (
    Card,
    CardCreateRequest,
    CardCreateResponse,
    CardDeleteResponse,
    CardScheduleFields,
    CardsListResponse,
    CardUpdateRequest,
    CardUpdateResponse,
)
from .deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DeckDeleteResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
    DeckWithCount,
)

__all__ = [
    "Card",
    "CardCreateRequest",
    "CardCreateResponse",
    "CardDeleteResponse",
    "CardScheduleFields",
    "CardUpdateRequest",
    "CardUpdateResponse",
    "CardsListResponse",
    "Deck",
    "DeckCreateRequest",
    "DeckCreateResponse",
    "DeckDeleteResponse",
    "DeckUpdateRequest",
    "DeckUpdateResponse",
    "DeckWithCount",
    "DecksListResponse",
]
