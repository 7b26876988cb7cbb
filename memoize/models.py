"""Database models."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from memoize.database import Base


class KeyValueRecord(Base):
    """One JSON value stored under a key within a namespace."""

    __tablename__ = "kv_records"

    namespace: Mapped[str] = mapped_column(String(64), primary_key=True)
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        """String representation of KeyValueRecord."""
        return f"<KeyValueRecord(namespace='{self.namespace}', key='{self.key}')>"
