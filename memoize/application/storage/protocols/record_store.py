"""Protocol for namespaced key-value record stores."""

from typing import Any, Protocol

JsonValue = dict[str, Any] | list[Any] | str | int | float | bool


class RecordStoreProtocol(Protocol):
    """
    Key to JSON value store scoped to one namespace.

    No transactions and no atomicity across calls: any two calls may be
    separated by a failure.
    """

    namespace: str

    def get(self, key: str) -> JsonValue | None:
        """
        Read a value.

        Returns:
            The stored value, or None when the key is absent

        Raises:
            StoreError: If the backend could not be read
        """
        ...

    def put(self, key: str, value: JsonValue) -> None:
        """
        Create or replace a value.

        Raises:
            StoreError: If the value was not written
        """
        ...

    def delete(self, key: str) -> None:
        """
        Remove a value. Deleting an absent key is a no-op.

        Raises:
            StoreError: If the backend could not be written
        """
        ...
