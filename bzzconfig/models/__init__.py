"""bzzconfig data models — all Pydantic v2."""

from bzzconfig.models.config import DEFAULT_PORT, ENS_ROOT_ADDRESS, NodeConfig
from bzzconfig.models.document import ZERO_ADDRESS, Address, DocumentSection
from bzzconfig.models.loader import VALID_TRANSITIONS, LoaderState
from bzzconfig.models.params import (
    ChunkerParams,
    HiveParams,
    KadParams,
    StoreParams,
    SwapParams,
    SyncParams,
)

__all__ = [
    # document
    "Address",
    "DocumentSection",
    "ZERO_ADDRESS",
    # collaborator params
    "StoreParams",
    "ChunkerParams",
    "KadParams",
    "HiveParams",
    "SyncParams",
    "SwapParams",
    # config
    "NodeConfig",
    "DEFAULT_PORT",
    "ENS_ROOT_ADDRESS",
    # loader
    "LoaderState",
    "VALID_TRANSITIONS",
]
