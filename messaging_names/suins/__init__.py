from .client import NameRecord, SuinsClient, SuinsRpcError

__all__ = [
    "NameRecord",
    "SuinsClient",
    "SuinsRpcError",
]
