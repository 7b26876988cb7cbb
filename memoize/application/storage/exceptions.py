"""Exceptions raised by record store implementations."""


class StoreError(Exception):
    """
    A record store operation did not succeed.

    Implementations wrap their backend's exceptions in StoreError so
    services never see driver-specific errors.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message if key is None else f"{message} (key={key})")


class CorruptRecordError(StoreError):
    """A stored value exists but cannot be read back as the expected record."""
