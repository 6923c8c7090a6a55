"""Name classifiers and normalizers shared by the resolvers."""

from messaging_names.naming.names import (
    ACCOUNT_ALIAS_SUFFIX,
    CANONICAL_ID_PREFIX,
    CHANNEL_PREFIX,
    format_channel_alias,
    is_account_alias,
    is_channel_alias,
    normalize_channel_alias,
)

__all__ = [
    "ACCOUNT_ALIAS_SUFFIX",
    "CANONICAL_ID_PREFIX",
    "CHANNEL_PREFIX",
    "format_channel_alias",
    "is_account_alias",
    "is_channel_alias",
    "normalize_channel_alias",
]
