"""Collaborator parameter sections aggregated into the node configuration.

Each collaborator (storage, chunker, hive, sync, swap) owns its parameters;
this package only builds their defaults, persists them and passes them
through.  Every section exposes a ``new_default`` factory taking the node
directory.  Durations are integer nanoseconds.
"""

from __future__ import annotations

import os
from typing import Any, ClassVar

from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import Field, PrivateAttr

from bzzconfig.core.identity import NodeIdentity
from bzzconfig.models.document import Address, DocumentSection

SECOND = 1_000_000_000
MILLISECOND = 1_000_000
HOUR = 3600 * SECOND

# Sync priorities
PRIORITY_LOW = 0
PRIORITY_MEDIUM = 1
PRIORITY_HIGH = 2


class StoreParams(DocumentSection):
    """Local chunk database parameters."""

    chunk_db_path: str = Field(alias="ChunkDbPath")
    db_capacity: int = Field(5_000_000, alias="DbCapacity")
    cache_capacity: int = Field(5000, alias="CacheCapacity")
    radius: int = Field(0, alias="Radius")

    @classmethod
    def new_default(cls, path: str) -> StoreParams:
        return cls(chunk_db_path=os.path.join(path, "chunks"))


class ChunkerParams(DocumentSection):
    """Tree chunker parameters."""

    branches: int = Field(128, alias="Branches")
    hash: str = Field("SHA3", alias="Hash")

    @classmethod
    def new_default(cls, path: str) -> ChunkerParams:
        # chunking is independent of the node directory
        return cls()


class KadParams(DocumentSection):
    """Kademlia table parameters, flattened into the hive section."""

    max_prox: int = Field(8, alias="MaxProx")
    prox_bin_size: int = Field(2, alias="ProxBinSize")
    bucket_size: int = Field(4, alias="BucketSize")
    purge_interval: int = Field(42 * HOUR, alias="PurgeInterval")
    initial_retry_interval: int = Field(42 * MILLISECOND, alias="InitialRetryInterval")
    max_idle_interval: int = Field(42 * 1000 * MILLISECOND, alias="MaxIdleInterval")
    conn_retry_exp: int = Field(2, alias="ConnRetryExp")


class HiveParams(DocumentSection):
    """Peer discovery (hive) parameters."""

    embedded: ClassVar[tuple[str, ...]] = ("kad",)

    call_interval: int = Field(3_000_000_000, alias="CallInterval")
    kad_db_path: str = Field(alias="KadDbPath")
    kad: KadParams = Field(default_factory=KadParams)

    @classmethod
    def new_default(cls, path: str) -> HiveParams:
        return cls(kad_db_path=os.path.join(path, "bzz-peers.json"))


class SyncParams(DocumentSection):
    """Syncer parameters."""

    request_db_path: str = Field(alias="RequestDbPath")
    request_db_batch_size: int = Field(512, alias="RequestDbBatchSize")
    key_buffer_size: int = Field(1024, alias="KeyBufferSize")
    sync_batch_size: int = Field(128, alias="SyncBatchSize")
    sync_buffer_size: int = Field(128, alias="SyncBufferSize")
    sync_cache_size: int = Field(1024, alias="SyncCacheSize")
    sync_priorities: list[int] = Field(
        default_factory=lambda: [
            PRIORITY_HIGH,
            PRIORITY_MEDIUM,
            PRIORITY_MEDIUM,
            PRIORITY_LOW,
            PRIORITY_LOW,
        ],
        alias="SyncPriorities",
    )
    sync_modes: list[bool] = Field(
        default_factory=lambda: [True, True, True, True, False],
        alias="SyncModes",
    )

    @classmethod
    def new_default(cls, path: str) -> SyncParams:
        return cls(request_db_path=os.path.join(path, "requests"))


class SwapParams(DocumentSection):
    """Incentive/accounting parameters, persisted nested under ``Swap``.

    The private key is bound in memory by :meth:`bind_key` on every load and
    is never part of the serialized document.
    """

    # price profile (wei)
    buy_at: int = Field(20_000_000_000, alias="BuyAt")
    sell_at: int = Field(20_000_000_000, alias="SellAt")
    pay_at: int = Field(100, alias="PayAt")
    drop_at: int = Field(10_000, alias="DropAt")
    # strategy
    auto_cash_interval: int = Field(300 * SECOND, alias="AutoCashInterval")
    auto_cash_threshold: int = Field(50_000_000_000_000, alias="AutoCashThreshold")
    auto_deposit_interval: int = Field(300 * SECOND, alias="AutoDepositInterval")
    auto_deposit_threshold: int = Field(
        50_000_000_000_000, alias="AutoDepositThreshold"
    )
    auto_deposit_buffer: int = Field(100_000_000_000_000, alias="AutoDepositBuffer")
    # pay profile
    public_key: str = Field(alias="PublicKey")
    contract: Address = Field(alias="Contract")
    beneficiary: Address = Field(alias="Beneficiary")

    _private_key: ec.EllipticCurvePrivateKey | None = PrivateAttr(default=None)

    @classmethod
    def new_default(cls, contract: str, identity: NodeIdentity) -> SwapParams:
        """Default swap parameters paying out to the identity's address."""
        return cls(
            public_key=identity.public_key_hex,
            contract=contract,
            beneficiary=identity.address_hex,
        )

    def bind_key(self, private_key: ec.EllipticCurvePrivateKey) -> None:
        """Attach the node's private key for signing cheques."""
        self._private_key = private_key

    @property
    def private_key(self) -> ec.EllipticCurvePrivateKey | None:
        """Key bound by :meth:`bind_key`, or ``None`` before binding."""
        return self._private_key

    def __eq__(self, other: Any) -> bool:
        # the bound key is runtime state, not part of the parameters
        if not isinstance(other, SwapParams):
            return NotImplemented
        return self.model_dump() == other.model_dump()
