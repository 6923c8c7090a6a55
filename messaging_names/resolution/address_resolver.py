"""SuiNS Resolver - Resolve account aliases (alice.sui) to Sui addresses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import structlog

from ..naming import is_account_alias
from .errors import ResolutionFailed
from .protocols import resolve_all

if TYPE_CHECKING:
    from ..suins.client import NameRecord

logger = structlog.get_logger()


@runtime_checkable
class NameRecordLookup(Protocol):
    """Anything that can fetch a SuiNS name record, e.g. SuinsClient."""

    async def get_name_record(self, name: str) -> NameRecord | None: ...


class SuiNSResolver:
    """Account resolver backed by a SuiNS lookup client.

    Addresses and anything not ending in .sui pass through unchanged.
    Lookup errors from the client propagate as-is; only a missing record or
    a record without a target address becomes ResolutionFailed.
    """

    def __init__(self, client: NameRecordLookup):
        self._client = client

    async def resolve(self, name_or_address: str) -> str:
        if not is_account_alias(name_or_address):
            return name_or_address

        # The name is sent verbatim; SuiNS owns normalization of its own names
        record = await self._client.get_name_record(name_or_address)
        target = getattr(record, "target_address", None) if record else None

        if not target:
            logger.warning("suins_resolution_failed", name=name_or_address, has_record=record is not None)
            raise ResolutionFailed(name_or_address)

        logger.debug("suins_resolved", name=name_or_address, address=target)
        return target

    async def resolve_many(self, names_or_addresses: Sequence[str]) -> list[str]:
        return await resolve_all(self, names_or_addresses)

    async def reverse_lookup(self, address: str) -> str | None:
        """Reverse lookup is not offered through the name-record lookup.

        Always returns None.
        """
        return None
