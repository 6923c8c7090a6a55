"""Central configuration -- all settings driven by environment variables.

Scripts load a local .env (python-dotenv) before importing this module, so
either the process environment or .env can supply values.

Persistence of the channel registry is controlled by CHANNEL_REGISTRY_DIR:
  - unset        -> data/channels (one JSON file per storage key)
  - ""           -> no storage, the registry stays in memory only
"""

import os

# ---------------------------------------------------------------------------
# SuiNS (account alias resolution)
# ---------------------------------------------------------------------------
# Any Sui fullnode exposing the suix_* JSON-RPC namespace works.

SUI_RPC_URL = os.environ.get("SUI_RPC_URL", "https://fullnode.mainnet.sui.io:443")
SUINS_TIMEOUT = float(os.environ.get("SUINS_TIMEOUT", "10.0"))
SUINS_MAX_RETRIES = int(os.environ.get("SUINS_MAX_RETRIES", "3"))
SUINS_RETRY_DELAY = float(os.environ.get("SUINS_RETRY_DELAY", "0.5"))

# ---------------------------------------------------------------------------
# Channel registry (channel alias resolution)
# ---------------------------------------------------------------------------

CHANNEL_REGISTRY_STORAGE_KEY = os.environ.get(
    "CHANNEL_REGISTRY_STORAGE_KEY", "sui-messaging-channels"
)
CHANNEL_REGISTRY_DIR = os.environ.get("CHANNEL_REGISTRY_DIR", "data/channels")
