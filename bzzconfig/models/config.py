"""Node configuration document — the aggregate persisted as ``config.json``."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, field_validator

from bzzconfig.models.document import Address, DocumentSection
from bzzconfig.models.params import (
    ChunkerParams,
    HiveParams,
    StoreParams,
    SwapParams,
    SyncParams,
)

DEFAULT_PORT = "8500"

# Well-known registry (ENS) root; never mutated at runtime.
ENS_ROOT_ADDRESS = "0x112234455c3a32fd11230c42e7bccd4a84e02010"


class NodeConfig(DocumentSection):
    """Identity-bound configuration of a single storage node.

    Document layout
    ---------------
    ``store``, ``chunker``, ``hive`` and ``sync`` are flattened into the
    top level of the document; ``swap`` is nested under ``Swap``.  Key order
    follows field order, which is part of the file format and must not be
    changed.

    Parameters
    ----------
    path:
        Node directory, ``<base path>/bzz-<fingerprint hex>``.
    public_key:
        ``0x``-prefixed public key the document was created for.
    bzz_key:
        ``0x``-prefixed fingerprint of ``public_key``.
    ens_root:
        Registry root address; ``None`` or zero in legacy documents.
    rtmp_port, ffmpeg_path:
        Caller-supplied values persisted verbatim.
    vod_path:
        Content-delivery path derived from the base path at creation.
    """

    embedded: ClassVar[tuple[str, ...]] = ("store", "chunker", "hive", "sync")

    store: StoreParams
    chunker: ChunkerParams
    hive: HiveParams
    swap: SwapParams = Field(alias="Swap")
    sync: SyncParams
    path: str = Field(alias="Path")
    port: str = Field(DEFAULT_PORT, alias="Port")
    public_key: str = Field(alias="PublicKey")
    bzz_key: str = Field(alias="BzzKey")
    ens_root: Address | None = Field(ENS_ROOT_ADDRESS, alias="EnsRoot")
    network_id: int = Field(alias="NetworkId", ge=0)
    rtmp_port: str = Field("", alias="RTMPPort")
    ffmpeg_path: str = Field("", alias="FFMpegPath")
    vod_path: str = Field("", alias="VodPath")

    @field_validator("ens_root", mode="before")
    @classmethod
    def empty_ens_root_as_none(cls, value: object) -> object:
        # older documents may carry an empty string
        return None if value == "" else value

    def save(self) -> None:
        """Persist to ``<path>/config.json``; see :func:`config_store.save`."""
        from bzzconfig.core import config_store

        config_store.save(self)
