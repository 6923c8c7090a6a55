"""Shared test fixtures for the messaging name resolution layer."""

from unittest.mock import AsyncMock

import pytest

from messaging_names.resolution import LocalChannelRegistry, SuiNSResolver
from messaging_names.storage import MemoryKeyValueStore
from messaging_names.suins import NameRecord


class MockSuinsClient:
    """Stand-in for SuinsClient with a scripted get_name_record."""

    def __init__(self) -> None:
        self.get_name_record = AsyncMock(return_value=None)

    def returns(self, *addresses: str | None) -> None:
        """Queue one lookup result per call (None = unregistered name)."""
        self.get_name_record.side_effect = [
            NameRecord(name="", target_address=a) if a is not None else None
            for a in addresses
        ]


@pytest.fixture
def suins_client() -> MockSuinsClient:
    return MockSuinsClient()


@pytest.fixture
def address_resolver(suins_client) -> SuiNSResolver:
    return SuiNSResolver(suins_client)


@pytest.fixture
def registry() -> LocalChannelRegistry:
    return LocalChannelRegistry()


@pytest.fixture
def populated_registry() -> LocalChannelRegistry:
    return LocalChannelRegistry({"general": "0xchannel1", "random": "0xchannel2"})


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


def _assert_inverse(registry: LocalChannelRegistry) -> None:
    """Check the name and ID maps are exact inverses."""
    forward = registry._name_to_id
    backward = registry._id_to_name
    assert len(forward) == len(backward)
    for name, channel_id in forward.items():
        assert backward[channel_id] == name


@pytest.fixture
def assert_inverse():
    return _assert_inverse
