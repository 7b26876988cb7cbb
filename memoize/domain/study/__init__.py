"""
Study bounded context - Domain layer.

This context handles the records a learner studies from:
- Decks owned by a single user
- Cards belonging to exactly one deck, carrying opaque scheduling state

Entities:
- Deck: a named collection of cards
- Card: a front/back pair with its Schedule
"""

from .entities import Card, Deck
from .value_objects import CardState, Schedule

__all__ = ["Card", "CardState", "Deck", "Schedule"]
