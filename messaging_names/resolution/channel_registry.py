"""Local Channel Registry - In-memory bidirectional channel name <-> ID mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import structlog

from ..naming import format_channel_alias, is_channel_alias, normalize_channel_alias
from .errors import AliasConflict, NameNotFound
from .protocols import resolve_all

logger = structlog.get_logger()


class LocalChannelRegistry:
    """In-memory channel name registry.

    Useful for local development, tests and single-session usage. Names are
    stored normalized (no '#', lower-case) in two maps that are always exact
    inverses of each other:
    - every name maps to one channel ID
    - every channel ID has at most one name

    Registering a new name for an ID that already has one renames the
    channel; registering a taken name for another ID raises AliasConflict.
    """

    def __init__(self, initial_mappings: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._name_to_id: dict[str, str] = {}
        self._id_to_name: dict[str, str] = {}
        if initial_mappings:
            self.import_(initial_mappings, merge=True)

    # =========================================================================
    # Resolution
    # =========================================================================

    async def resolve(self, name_or_id: str) -> str:
        if not is_channel_alias(name_or_id):
            return name_or_id

        channel_id = self._name_to_id.get(normalize_channel_alias(name_or_id))
        if channel_id is None:
            raise NameNotFound(format_channel_alias(name_or_id))
        return channel_id

    async def resolve_many(self, names_or_ids: Sequence[str]) -> list[str]:
        return await resolve_all(self, names_or_ids)

    async def reverse_lookup(self, channel_id: str) -> str | None:
        name = self._id_to_name.get(channel_id)
        return format_channel_alias(name) if name is not None else None

    # =========================================================================
    # Mutation
    # =========================================================================

    async def register(self, name: str, channel_id: str) -> None:
        """Bind a channel name to a channel ID.

        Raises:
            AliasConflict: If the name is already bound to a different ID
        """
        normalized = normalize_channel_alias(name)

        existing_id = self._name_to_id.get(normalized)
        if existing_id is not None and existing_id != channel_id:
            raise AliasConflict(format_channel_alias(name), existing_id, channel_id)
        if existing_id == channel_id:
            return

        previous_name = self._id_to_name.get(channel_id)
        if previous_name is not None:
            del self._name_to_id[previous_name]
            logger.debug(
                "channel_renamed",
                channel_id=channel_id,
                old_name=previous_name,
                new_name=normalized,
            )

        self._name_to_id[normalized] = channel_id
        self._id_to_name[channel_id] = normalized
        logger.debug("channel_registered", name=normalized, channel_id=channel_id)

    async def unregister(self, name: str) -> None:
        normalized = normalize_channel_alias(name)
        channel_id = self._name_to_id.pop(normalized, None)
        if channel_id is None:
            return
        del self._id_to_name[channel_id]
        logger.debug("channel_unregistered", name=normalized, channel_id=channel_id)

    async def list(self) -> dict[str, str]:
        """All registrations keyed by display name ("#general")."""
        return {format_channel_alias(name): cid for name, cid in self._name_to_id.items()}

    # =========================================================================
    # Bulk operations
    # =========================================================================

    def export(self) -> dict[str, str]:
        """Registrations keyed by bare normalized name, for persistence."""
        return dict(self._name_to_id)

    def import_(self, data: Mapping[str, str] | Iterable[tuple[str, str]], merge: bool = True) -> None:
        """Load previously exported registrations.

        Args:
            data: Name -> ID mapping (or pairs), names in any form
            merge: If True, keep existing registrations; if False, replace them

        Later entries win over earlier ones and over existing bindings; no
        AliasConflict is raised.
        """
        if not merge:
            self.clear()

        pairs = data.items() if isinstance(data, Mapping) else data
        count = 0
        for name, channel_id in pairs:
            self._bind(normalize_channel_alias(name), channel_id)
            count += 1

        logger.debug("channels_imported", count=count, merge=merge, size=self.size)

    def _bind(self, normalized: str, channel_id: str) -> None:
        # Retire whatever either side was bound to so the maps stay inverses
        old_id = self._name_to_id.get(normalized)
        if old_id is not None and old_id != channel_id:
            del self._id_to_name[old_id]
        old_name = self._id_to_name.get(channel_id)
        if old_name is not None and old_name != normalized:
            del self._name_to_id[old_name]

        self._name_to_id[normalized] = channel_id
        self._id_to_name[channel_id] = normalized

    def clear(self) -> None:
        self._name_to_id.clear()
        self._id_to_name.clear()

    @property
    def size(self) -> int:
        return len(self._name_to_id)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_channel_alias(name) in self._name_to_id
