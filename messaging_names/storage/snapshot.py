"""Registry snapshot codec.

A snapshot is a flat JSON object mapping bare channel names to channel IDs:

    {"general": "0xchannel1", "random": "0xchannel2"}

No version field, no nesting. Keys keep registration order.
"""

import json

from pydantic import TypeAdapter, ValidationError

_SNAPSHOT_ADAPTER = TypeAdapter(dict[str, str])


class SnapshotError(ValueError):
    """Stored bytes are not a valid registry snapshot."""


def encode_snapshot(mapping: dict[str, str]) -> bytes:
    return json.dumps(mapping).encode("utf-8")


def decode_snapshot(raw: bytes | str) -> dict[str, str]:
    """Parse and validate a stored snapshot.

    Raises:
        SnapshotError: If the data is not JSON or not a str -> str object
    """
    try:
        return _SNAPSHOT_ADAPTER.validate_json(raw, strict=True)
    except ValidationError as e:
        raise SnapshotError(f"Invalid registry snapshot: {e.error_count()} error(s)") from e
