"""
Study context - Application layer.

Owner-scoped deck and card services built on record repositories and
index maintainers, plus the cascade that deletes a deck's cards before
the deck itself.
"""
