"""Name resolution for the messaging client.

This module provides:
- Resolver / NamedRegistry: the interfaces the messaging client depends on
- SuiNSResolver: account aliases (alice.sui) -> addresses via SuiNS
- LocalChannelRegistry: in-memory channel names (#general) <-> channel IDs
- PersistentChannelRegistry: LocalChannelRegistry mirrored to a key/value store
"""

from __future__ import annotations

from pathlib import Path

from .address_resolver import NameRecordLookup, SuiNSResolver
from .channel_registry import LocalChannelRegistry
from .errors import AliasConflict, NameNotFound, ResolutionError, ResolutionFailed
from .persistent_registry import DEFAULT_STORAGE_KEY, PersistentChannelRegistry
from .protocols import NamedRegistry, Resolver, resolve_all


def create_channel_registry(
    storage_dir: str | Path | None = None,
    storage_key: str | None = None,
) -> PersistentChannelRegistry:
    """Create a channel registry based on configuration.

    Arguments fall back to CHANNEL_REGISTRY_DIR and CHANNEL_REGISTRY_STORAGE_KEY
    from messaging_names.config. An empty directory disables persistence.
    """
    from ..config import CHANNEL_REGISTRY_DIR, CHANNEL_REGISTRY_STORAGE_KEY
    from ..storage import FileKeyValueStore

    directory = CHANNEL_REGISTRY_DIR if storage_dir is None else storage_dir
    storage = FileKeyValueStore(directory) if str(directory) else None
    return PersistentChannelRegistry(
        storage=storage,
        storage_key=storage_key or CHANNEL_REGISTRY_STORAGE_KEY,
    )


__all__ = [
    "AliasConflict",
    "DEFAULT_STORAGE_KEY",
    "LocalChannelRegistry",
    "NameNotFound",
    "NameRecordLookup",
    "NamedRegistry",
    "PersistentChannelRegistry",
    "ResolutionError",
    "ResolutionFailed",
    "Resolver",
    "SuiNSResolver",
    "create_channel_registry",
    "resolve_all",
]
