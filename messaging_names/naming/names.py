"""Name classification and normalization for account and channel aliases.

Two independent naming domains:
- Account aliases are SuiNS names ("alice.sui", "treasury.dao.sui").
- Channel aliases are human-readable channel names ("#general", "general").

Anything starting with 0x is treated as a canonical on-chain identifier.
"""

ACCOUNT_ALIAS_SUFFIX = ".sui"
CHANNEL_PREFIX = "#"
CANONICAL_ID_PREFIX = "0x"


def is_account_alias(value: str) -> bool:
    """Check whether a string is a SuiNS name (ends with .sui, any case).

    A bare ".sui" counts as a name; the empty string does not.
    """
    return value.lower().endswith(ACCOUNT_ALIAS_SUFFIX)


def is_channel_alias(value: str) -> bool:
    """Check whether a string looks like a channel name rather than an object ID."""
    if not value:
        return False
    if value.startswith(CHANNEL_PREFIX):
        return True
    if value.startswith(CANONICAL_ID_PREFIX):
        return False
    # Bare words ("general") are names
    return True


def normalize_channel_alias(value: str) -> str:
    """Trim, lower-case and drop the leading '#'.

    The result is the only form used as a registry key. Repeated prefixes
    ("##general", "# general") are stripped too, so normalizing twice gives
    the same key as normalizing once.
    """
    normalized = value.strip().lower()
    while normalized.startswith(CHANNEL_PREFIX):
        normalized = normalized[len(CHANNEL_PREFIX):].strip()
    return normalized


def format_channel_alias(value: str) -> str:
    """Render a channel name for display, e.g. "  General " -> "#general"."""
    return f"{CHANNEL_PREFIX}{normalize_channel_alias(value)}"
