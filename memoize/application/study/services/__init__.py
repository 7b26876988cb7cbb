from .card_service import CardService
from .deck_deletion_cascade import DeckDeletionCascade, DeckDeletionStep
from .deck_service import DeckService

__all__ = ["CardService", "DeckDeletionCascade", "DeckDeletionStep", "DeckService"]
