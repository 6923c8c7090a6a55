from .kv_store import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore, StorageQuotaExceeded
from .snapshot import SnapshotError, decode_snapshot, encode_snapshot

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SnapshotError",
    "StorageQuotaExceeded",
    "decode_snapshot",
    "encode_snapshot",
]
