"""bzzconfig: identity-bound configuration for a storage network node.

Derives a node directory from the node's secp256k1 key, loads or creates
``config.json`` there, and refuses documents created for another identity:
  - Keccak-256 fingerprint of the public key names the node directory
  - Collaborator parameters (store, chunker, hive, sync, swap) aggregated
    into one JSON document with the historical key layout
  - Atomic writes; existing documents are never overwritten on load
  - Legacy documents without an ENS root are repaired in memory
"""

__version__ = "0.1.0"
__description__ = "Identity-bound storage node configuration"

from bzzconfig.core.config_loader import ConfigLoader, new_config
from bzzconfig.core.config_store import save
from bzzconfig.core.identity import NodeIdentity, derive, load_private_key
from bzzconfig.models.config import NodeConfig

__all__ = [
    "ConfigLoader",
    "NodeConfig",
    "NodeIdentity",
    "derive",
    "load_private_key",
    "new_config",
    "save",
    "__version__",
]
