"""Persistent Channel Registry - LocalChannelRegistry mirrored to a key/value store."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import structlog

from ..storage import KeyValueStore, decode_snapshot, encode_snapshot
from .channel_registry import LocalChannelRegistry

logger = structlog.get_logger()

DEFAULT_STORAGE_KEY = "sui-messaging-channels"


class PersistentChannelRegistry:
    """Channel registry that writes a snapshot after every register/unregister.

    Persistence is best-effort: a missing or corrupt snapshot means starting
    empty, and failed writes are logged but never undo or fail the in-memory
    change. Without a storage handle this behaves exactly like
    LocalChannelRegistry.
    """

    def __init__(
        self,
        storage: KeyValueStore | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        registry: LocalChannelRegistry | None = None,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._registry = registry if registry is not None else LocalChannelRegistry()

        stored = self._read()
        if stored:
            self._registry.import_(stored, merge=True)
            logger.info("loaded_channel_registry", key=storage_key, channels=len(stored))

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def registry(self) -> LocalChannelRegistry:
        return self._registry

    # =========================================================================
    # NamedRegistry
    # =========================================================================

    async def resolve(self, name_or_id: str) -> str:
        return await self._registry.resolve(name_or_id)

    async def resolve_many(self, names_or_ids: Sequence[str]) -> list[str]:
        return await self._registry.resolve_many(names_or_ids)

    async def reverse_lookup(self, channel_id: str) -> str | None:
        return await self._registry.reverse_lookup(channel_id)

    async def register(self, name: str, channel_id: str) -> None:
        await self._registry.register(name, channel_id)
        self._persist()

    async def unregister(self, name: str) -> None:
        await self._registry.unregister(name)
        self._persist()

    async def list(self) -> dict[str, str]:
        return await self._registry.list()

    # =========================================================================
    # Bulk operations (not persisted until save())
    # =========================================================================

    def export(self) -> dict[str, str]:
        return self._registry.export()

    def import_(self, data: Mapping[str, str] | Iterable[tuple[str, str]], merge: bool = True) -> None:
        self._registry.import_(data, merge=merge)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def size(self) -> int:
        return self._registry.size

    def __len__(self) -> int:
        return self._registry.size

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    # =========================================================================
    # Storage
    # =========================================================================

    def save(self) -> None:
        """Force a write of the current registrations."""
        self._persist()

    def reload(self) -> None:
        """Replace in-memory registrations with the stored snapshot.

        Unsaved changes are discarded. If nothing usable is stored, the
        in-memory state is left as it is.
        """
        stored = self._read()
        if stored is None:
            return
        self._registry.import_(stored, merge=False)
        logger.info("reloaded_channel_registry", key=self._storage_key, channels=self._registry.size)

    def _read(self) -> dict[str, str] | None:
        if self._storage is None:
            return None
        try:
            raw = self._storage.get(self._storage_key)
            if not raw:
                return None
            return decode_snapshot(raw)
        except Exception as e:
            logger.warning("channel_snapshot_unreadable", key=self._storage_key, error=str(e))
            return None

    def _persist(self) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set(self._storage_key, encode_snapshot(self._registry.export()))
        except Exception as e:
            # Quota exceeded, read-only disk, ...; the in-memory change stands
            logger.warning("channel_snapshot_write_failed", key=self._storage_key, error=str(e))
