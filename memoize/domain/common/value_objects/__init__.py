"""Common value objects shared across domain modules."""

from .ids import CardId, DeckId, OwnerId

__all__ = [
    "CardId",
    "DeckId",
    "OwnerId",
]
