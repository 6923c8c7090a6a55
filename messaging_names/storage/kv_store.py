"""Byte-oriented key/value stores used to persist registry snapshots."""

import hashlib
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

logger = structlog.get_logger()


class StorageQuotaExceeded(OSError):
    """Raised when a write would exceed a store's size limit."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Interface satisfied by MemoryKeyValueStore and FileKeyValueStore.

    set() raises on failure; callers decide whether failure matters.
    """

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store, optionally capped at quota_bytes in total."""

    def __init__(self, quota_bytes: int | None = None):
        self.quota_bytes = quota_bytes
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        if self.quota_bytes is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(value) > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Writing {len(value)} bytes to {key!r} exceeds quota of {self.quota_bytes} bytes"
                )
        self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class FileKeyValueStore:
    """One file per key under a root directory.

    Writes go to a temp file in the same directory and are swapped in with
    os.replace, so readers never see a half-written value.
    """

    def __init__(self, root_dir: str | Path = "data/channels", suffix: str = ".json"):
        self.root_dir = Path(root_dir)
        self.suffix = suffix

    def path_for(self, key: str) -> Path:
        """Map a key to its file. Safe keys are used as-is.

        Keys needing sanitization get a hash of the raw key appended, so
        "team/a" and "team_a" never share a file.
        """
        name = _UNSAFE_CHARS.sub("_", key)
        if not key or name != key:
            digest = hashlib.sha256(key.encode("utf-8")).hexdigest()[:12]
            name = f"{name}-{digest}"
        return self.root_dir / f"{name}{self.suffix}"

    def get(self, key: str) -> bytes | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("stored_value", key=key, path=str(path), bytes=len(value))

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)
