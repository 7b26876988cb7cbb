from .id_generator import IdGeneratorProtocol
from .record_store import JsonValue, RecordStoreProtocol

__all__ = ["IdGeneratorProtocol", "JsonValue", "RecordStoreProtocol"]
