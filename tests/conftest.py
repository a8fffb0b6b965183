"""Shared test fixtures for bzzconfig."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from bzzconfig.core.config_builder import build_default_config
from bzzconfig.core.identity import NodeIdentity, derive, load_private_key
from bzzconfig.models.config import NodeConfig

KEY_A_HEX = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
KEY_B_HEX = "8f2a55949038a9610f50fb23b5883af3b4ecb3c3bb792cbcefbd1542c692be63"

CONTRACT = "0x00000000000000000000000000000000000000c0"


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def base_path(tmp_dir: Path) -> Path:
    """Base data directory holding node directories."""
    return tmp_dir / "nodes"


@pytest.fixture
def private_key() -> ec.EllipticCurvePrivateKey:
    """Provide a deterministic secp256k1 key (key A)."""
    return load_private_key(KEY_A_HEX)


@pytest.fixture
def other_private_key() -> ec.EllipticCurvePrivateKey:
    """Provide a second deterministic key (key B), distinct from key A."""
    return load_private_key(KEY_B_HEX)


@pytest.fixture
def identity(private_key: ec.EllipticCurvePrivateKey) -> NodeIdentity:
    """Identity derived from key A."""
    return derive(private_key)


@pytest.fixture
def key_file(tmp_dir: Path) -> Path:
    """A key file holding key A in hex, as operators store it."""
    path = tmp_dir / "node.key"
    path.write_text(f"0x{KEY_A_HEX}\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Config factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config(
    base_path: Path, identity: NodeIdentity
) -> Callable[..., NodeConfig]:
    """Factory fixture: build a default NodeConfig for key A."""

    def _factory(**overrides: Any) -> NodeConfig:
        defaults: dict[str, Any] = {
            "contract": CONTRACT,
            "network_id": 326326,
            "rtmp_port": "1935",
            "ffmpeg_path": "/usr/bin/ffmpeg",
        }
        defaults.update(overrides)
        return build_default_config(base_path, identity, **defaults)

    return _factory
