"""Config loader — load-or-create orchestration with identity validation.

Lifecycle of one load::

    START -> DIRECTORY_ENSURED -> CREATING -------------> READY
                               \\-> READING -> VALIDATING -> READY
    (any non-terminal state) -> FAILED

The loader is agnostic to where the private key comes from; key management
is left to the caller.  It never overwrites an existing document: a file
created for another identity is a hard failure.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import TypeAdapter, ValidationError

from bzzconfig.core import config_store
from bzzconfig.core.config_builder import build_default_config
from bzzconfig.core.config_store import ConfigError, ConfigNotFound, PersistFailed
from bzzconfig.core.identity import NodeIdentity, derive
from bzzconfig.models.config import ENS_ROOT_ADDRESS, NodeConfig
from bzzconfig.models.document import Address, is_zero_address
from bzzconfig.models.loader import VALID_TRANSITIONS, LoaderState

logger = logging.getLogger(__name__)

# Keys that must be present in a persisted document for it to be validated.
MANDATORY_KEYS = ("PublicKey", "BzzKey")

_address = TypeAdapter(Address)


class ParseFailed(ConfigError):
    """Raised when a persisted config is not a well-formed document."""


class IdentityMismatch(ConfigError):
    """Raised when a persisted config belongs to a different identity.

    Parameters
    ----------
    field:
        Document key that disagrees (``PublicKey`` or ``BzzKey``).
    expected:
        Value derived from the presented private key.
    actual:
        Value found in the config file.
    """

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        *,
        path: Path | str | None = None,
    ) -> None:
        super().__init__(
            f"{field} does not match the one in the config file {expected} != {actual}",
            path=path,
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class InvalidTransitionError(RuntimeError):
    """Raised when the loader is driven through an invalid state transition."""


def _overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay *override* onto *base*, merging nested mappings key by key."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads the config for one node identity, creating it on first use.

    One loader performs exactly one load; the caller serializes loads for
    the same identity.

    Parameters
    ----------
    base_path:
        Data directory holding one sub-directory per node identity.
    contract:
        Swap contract address used when defaults are built.  A malformed
        address raises ``ValueError`` before anything touches the disk.
    private_key:
        The node's secp256k1 private key.
    network_id:
        Network the node joins (only used for a newly created config).
    rtmp_port, ffmpeg_path:
        Passthrough values (only used for a newly created config).
    """

    def __init__(
        self,
        base_path: Path | str,
        contract: str,
        private_key: ec.EllipticCurvePrivateKey,
        network_id: int,
        rtmp_port: str = "",
        ffmpeg_path: str = "",
    ) -> None:
        self._base_path = base_path
        try:
            self._contract = _address.validate_python(contract)
        except ValidationError as exc:
            raise ValueError(f"invalid contract address: {contract!r}") from exc
        self._private_key = private_key
        self._network_id = network_id
        self._rtmp_port = rtmp_port
        self._ffmpeg_path = ffmpeg_path
        self.identity: NodeIdentity = derive(private_key)
        self.state = LoaderState.START
        self.created = False

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def _transition(self, target: LoaderState) -> None:
        allowed = VALID_TRANSITIONS.get(self.state, set())
        if target not in allowed:
            raise InvalidTransitionError(
                f"Cannot transition config loader from {self.state.value} to "
                f"{target.value}. Allowed: {[s.value for s in allowed]}"
            )
        logger.debug("Config loader: %s -> %s", self.state.value, target.value)
        self.state = target

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self) -> NodeConfig:
        """Run the load to completion and return a validated config.

        Raises
        ------
        DirectoryCreationFailed, FileReadFailed, PersistFailed, ParseFailed,
        IdentityMismatch
            The loader is left in ``FAILED``.
        """
        if self.state != LoaderState.START:
            raise InvalidTransitionError(
                f"Config loader already used (state {self.state.value})"
            )
        try:
            return self._load()
        except ConfigError:
            self._transition(LoaderState.FAILED)
            raise

    def _load(self) -> NodeConfig:
        logger.info("Config: RTMP Port: %s", self._rtmp_port)
        defaults = build_default_config(
            self._base_path,
            self.identity,
            contract=self._contract,
            network_id=self._network_id,
            rtmp_port=self._rtmp_port,
            ffmpeg_path=self._ffmpeg_path,
        )
        config_store.ensure_directory(defaults.path)
        self._transition(LoaderState.DIRECTORY_ENSURED)

        target = config_store.config_path(defaults.path)
        try:
            data = config_store.load(target)
        except ConfigNotFound:
            self._transition(LoaderState.CREATING)
            return self._create(defaults)

        self._transition(LoaderState.READING)
        config = self._parse(data, defaults, target)

        self._transition(LoaderState.VALIDATING)
        self._validate(config, target)
        if is_zero_address(config.ens_root):
            logger.warning(
                "Config %s has no ENS root, using default %s", target, ENS_ROOT_ADDRESS
            )
            config.ens_root = ENS_ROOT_ADDRESS
        config.swap.bind_key(self._private_key)

        self._transition(LoaderState.READY)
        logger.info("Loaded config %s", target)
        return config

    def _create(self, config: NodeConfig) -> NodeConfig:
        try:
            target = config_store.save(config)
        except PersistFailed as exc:
            raise PersistFailed(f"error writing config: {exc}", path=exc.path) from exc
        config.swap.bind_key(self._private_key)
        self.created = True
        self._transition(LoaderState.READY)
        logger.info("Created config %s", target)
        return config

    @staticmethod
    def _parse(data: bytes, defaults: NodeConfig, target: Path) -> NodeConfig:
        try:
            raw = json.loads(data)
        except (ValueError, RecursionError) as exc:
            # RecursionError: nesting deeper than the decoder can follow
            raise ParseFailed(f"unable to parse config: {exc}", path=target) from exc
        if not isinstance(raw, dict):
            raise ParseFailed(
                f"unable to parse config: expected an object, got {type(raw).__name__}",
                path=target,
            )
        for key in MANDATORY_KEYS:
            if not isinstance(raw.get(key), str):
                raise ParseFailed(
                    f"unable to parse config: missing {key}", path=target
                )

        # missing optional keys keep their defaults
        merged = _overlay(defaults.to_document(), raw)
        try:
            return NodeConfig.from_document(merged)
        except ValidationError as exc:
            raise ParseFailed(f"unable to parse config: {exc}", path=target) from exc

    def _validate(self, config: NodeConfig, target: Path) -> None:
        if config.public_key != self.identity.public_key_hex:
            raise IdentityMismatch(
                "PublicKey",
                self.identity.public_key_hex,
                config.public_key,
                path=target,
            )
        if config.bzz_key != self.identity.bzz_key:
            raise IdentityMismatch(
                "BzzKey", self.identity.bzz_key, config.bzz_key, path=target
            )


def new_config(
    base_path: Path | str,
    contract: str,
    private_key: ec.EllipticCurvePrivateKey,
    network_id: int,
    rtmp_port: str = "",
    ffmpeg_path: str = "",
) -> NodeConfig:
    """Load the node config for *private_key*, creating it if absent.

    See :class:`ConfigLoader` for parameters and raised errors.
    """
    loader = ConfigLoader(
        base_path,
        contract,
        private_key,
        network_id,
        rtmp_port=rtmp_port,
        ffmpeg_path=ffmpeg_path,
    )
    return loader.load()
