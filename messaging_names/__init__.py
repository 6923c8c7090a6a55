"""Name resolution and channel registry for Sui messaging.

Lets callers address channels and accounts by human-readable names
("#general", "alice.sui") instead of on-chain object IDs and addresses.
"""

from messaging_names.naming import (
    format_channel_alias,
    is_account_alias,
    is_channel_alias,
    normalize_channel_alias,
)
from messaging_names.resolution import (
    AliasConflict,
    LocalChannelRegistry,
    NamedRegistry,
    NameNotFound,
    PersistentChannelRegistry,
    ResolutionError,
    ResolutionFailed,
    Resolver,
    SuiNSResolver,
    create_channel_registry,
)

__all__ = [
    "AliasConflict",
    "LocalChannelRegistry",
    "NameNotFound",
    "NamedRegistry",
    "PersistentChannelRegistry",
    "ResolutionError",
    "ResolutionFailed",
    "Resolver",
    "SuiNSResolver",
    "create_channel_registry",
    "format_channel_alias",
    "is_account_alias",
    "is_channel_alias",
    "normalize_channel_alias",
]

__version__ = "0.1.0"
