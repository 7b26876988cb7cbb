"""Process-local record store."""

import json
import threading

from memoize.application.storage.exceptions import StoreError
from memoize.application.storage.protocols.record_store import JsonValue


class InMemoryBackend:
    """Shared dictionary holding every namespace's records."""

    def __init__(self) -> None:
        self.records: dict[tuple[str, str], str] = {}
        self.lock = threading.Lock()

    def clear(self) -> None:
        with self.lock:
            self.records.clear()


class InMemoryRecordStore:
    """
    Namespaced view onto an InMemoryBackend.

    Values are kept as JSON text, so what comes out is never the object
    that went in and only JSON-serializable values can be stored.
    """

    def __init__(self, backend: InMemoryBackend, namespace: str) -> None:
        self.backend = backend
        self.namespace = namespace

    def get(self, key: str) -> JsonValue | None:
        with self.backend.lock:
            raw = self.backend.records.get((self.namespace, key))
        return json.loads(raw) if raw is not None else None

    def put(self, key: str, value: JsonValue) -> None:
        if value is None:
            raise StoreError("Cannot store an absent value", key=key)
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StoreError("Value is not JSON serializable", key=key) from e
        with self.backend.lock:
            self.backend.records[(self.namespace, key)] = raw

    def delete(self, key: str) -> None:
        with self.backend.lock:
            self.backend.records.pop((self.namespace, key), None)
