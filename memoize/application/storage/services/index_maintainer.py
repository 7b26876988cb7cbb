"""Maintains lists of child ids keyed by a parent id."""

import structlog

from memoize.application.storage.protocols.record_store import RecordStoreProtocol

logger = structlog.get_logger(__name__)


class IndexMaintainer:
    """
    Forward index stored as one JSON list per parent.

    The list for parent ``p`` lives under ``<name>:<p>`` in the given
    store. Every mutation reads the list, changes it and writes it back,
    so two concurrent writers to the same list race and the last one wins.
    """

    def __init__(self, store: RecordStoreProtocol, name: str) -> None:
        self.store = store
        self.name = name

    def key_for(self, list_key: str) -> str:
        return f"{self.name}:{list_key}"

    def read(self, list_key: str) -> list[str]:
        """
        Read the ids indexed under a parent, in insertion order.

        A missing list reads as empty. Non-string entries are skipped.

        Raises:
            StoreError: If the store could not be read
        """
        value = self.store.get(self.key_for(list_key))
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning("malformed_index", index=self.name, list_key=list_key)
            return []
        return [item for item in value if isinstance(item, str)]

    def add(self, list_key: str, item_id: str) -> None:
        """
        Append an id, creating the list if needed.

        Adding an id that is already present writes nothing.
        """
        ids = self.read(list_key)
        if item_id in ids:
            return
        ids.append(item_id)
        self.store.put(self.key_for(list_key), ids)

    def remove(self, list_key: str, item_id: str) -> None:
        """Drop an id. Removing an id that is not present writes nothing."""
        ids = self.read(list_key)
        if item_id not in ids:
            return
        self.store.put(self.key_for(list_key), [i for i in ids if i != item_id])

    def clear(self, list_key: str) -> None:
        """Delete the whole list."""
        self.store.delete(self.key_for(list_key))
