"""Memoize Store: owner-scoped deck and card storage."""

__version__ = "0.1.0"
