"""Resolver interfaces consumed by the messaging client."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Protocols (duck typing made explicit)
# ---------------------------------------------------------------------------
@runtime_checkable
class Resolver(Protocol):
    """Interface satisfied by SuiNSResolver and the channel registries.

    resolve() returns canonical identifiers unchanged and raises for names
    it cannot resolve. reverse_lookup() returns None when no name is known.
    """

    async def resolve(self, name_or_id: str) -> str: ...
    async def resolve_many(self, names_or_ids: Sequence[str]) -> list[str]: ...
    async def reverse_lookup(self, identifier: str) -> str | None: ...


@runtime_checkable
class NamedRegistry(Resolver, Protocol):
    """A Resolver whose name bindings can be changed by the caller."""

    async def register(self, name: str, identifier: str) -> None: ...
    async def unregister(self, name: str) -> None: ...
    async def list(self) -> dict[str, str]: ...


async def resolve_all(resolver: Resolver, names_or_ids: Sequence[str]) -> list[str]:
    """Resolve every input concurrently, keeping input order.

    The first failure propagates unwrapped, outstanding lookups are cancelled
    before it does, and no partial result is returned.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(resolver.resolve(value)) for value in names_or_ids]
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from None
    return [task.result() for task in tasks]
