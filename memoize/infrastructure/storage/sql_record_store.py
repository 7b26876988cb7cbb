"""Record store backed by the kv_records table."""

import copy

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from memoize.application.storage.exceptions import StoreError
from memoize.application.storage.protocols.record_store import JsonValue
from memoize.models import KeyValueRecord

logger = structlog.get_logger(__name__)


class SqlRecordStore:
    """
    Namespaced key-value store on top of a SQLAlchemy session.

    Each call commits on its own; a failed call is rolled back and raised
    as StoreError. Nothing spans more than one call.
    """

    def __init__(self, db: Session, namespace: str) -> None:
        self.db = db
        self.namespace = namespace

    def _find(self, key: str) -> KeyValueRecord | None:
        stmt = select(KeyValueRecord).where(
            KeyValueRecord.namespace == self.namespace,
            KeyValueRecord.key == key,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get(self, key: str) -> JsonValue | None:
        try:
            record = self._find(key)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("Failed to read record", key=key) from e
        return copy.deepcopy(record.value) if record else None

    def put(self, key: str, value: JsonValue) -> None:
        """
        Insert or replace the value under key.

        Raises:
            StoreError: If value is None or the write failed
        """
        if value is None:
            raise StoreError("Cannot store an absent value", key=key)
        try:
            record = self._find(key)
            if record is None:
                self.db.add(
                    KeyValueRecord(namespace=self.namespace, key=key, value=copy.deepcopy(value))
                )
            else:
                record.value = copy.deepcopy(value)
            self.db.commit()
        except (SQLAlchemyError, TypeError, ValueError) as e:
            # TypeError/ValueError come from JSON serialization of the value
            self.db.rollback()
            raise StoreError("Failed to write record", key=key) from e
        logger.debug("record_written", namespace=self.namespace, key=key)

    def delete(self, key: str) -> None:
        try:
            record = self._find(key)
            if record is None:
                return
            self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("Failed to delete record", key=key) from e
        logger.debug("record_deleted", namespace=self.namespace, key=key)
