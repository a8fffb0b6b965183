"""Default config construction — pure, no filesystem access.

Assembles a fresh :class:`NodeConfig` from the node identity, caller
parameters and each collaborator's default parameters.
"""

from __future__ import annotations

import os
from pathlib import Path

from bzzconfig.core.identity import NodeIdentity
from bzzconfig.models.config import DEFAULT_PORT, ENS_ROOT_ADDRESS, NodeConfig
from bzzconfig.models.params import (
    ChunkerParams,
    HiveParams,
    StoreParams,
    SwapParams,
    SyncParams,
)

NAMESPACE_PREFIX = "bzz"

# Legacy content-delivery path derivation: a literal substring swap on the
# base path.  Must stay byte-for-byte compatible with existing deployments.
VOD_PATH_SEGMENT = "livepeernet/livepeer"
VOD_PATH_REPLACEMENT = "vod"


def node_directory(base_path: Path | str, identity: NodeIdentity) -> str:
    """Return ``<base_path>/bzz-<fingerprint hex>`` as an absolute path."""
    # absolute, unlike derive_vod_path which works on the base path as given
    base = os.path.abspath(os.fspath(base_path))
    return os.path.join(base, f"{NAMESPACE_PREFIX}-{identity.fingerprint_hex}")


def derive_vod_path(base_path: Path | str) -> str:
    """Replace every ``livepeernet/livepeer`` in *base_path* with ``vod``."""
    return os.fspath(base_path).replace(VOD_PATH_SEGMENT, VOD_PATH_REPLACEMENT)


def build_default_config(
    base_path: Path | str,
    identity: NodeIdentity,
    *,
    contract: str,
    network_id: int,
    rtmp_port: str = "",
    ffmpeg_path: str = "",
) -> NodeConfig:
    """Build the default configuration for *identity* under *base_path*.

    Parameters
    ----------
    base_path:
        Data directory holding one sub-directory per node identity.
    identity:
        Values derived from the node's private key.
    contract:
        Address of the swap (chequebook) contract.
    network_id:
        Network the node joins.
    rtmp_port, ffmpeg_path:
        Passthrough values persisted as given.
    """
    path = node_directory(base_path, identity)
    return NodeConfig(
        store=StoreParams.new_default(path),
        chunker=ChunkerParams.new_default(path),
        hive=HiveParams.new_default(path),
        swap=SwapParams.new_default(contract, identity),
        sync=SyncParams.new_default(path),
        path=path,
        port=DEFAULT_PORT,
        public_key=identity.public_key_hex,
        bzz_key=identity.bzz_key,
        ens_root=ENS_ROOT_ADDRESS,
        network_id=network_id,
        rtmp_port=rtmp_port,
        ffmpeg_path=ffmpeg_path,
        vod_path=derive_vod_path(base_path),
    )
