"""
Domain layer.

The domain layer holds decks, cards and the rules they enforce on
themselves. It has no dependencies on storage, HTTP or configuration.

This layer contains:
- Entities: Deck and Card, identified by opaque string ids
- Value Objects: typed ids and the card Schedule
- Exceptions: raised when an invariant would be broken
"""
