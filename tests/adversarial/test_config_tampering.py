"""Adversarial tests — tampered config documents.

These tests verify that the config loader refuses:
1. A document whose public key was swapped for another node's
2. A document whose public key matches but fingerprint was rewritten
3. Swap parameters smuggling in a private key
4. Garbage written over the file
and that none of these cases causes the file to be rewritten.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bzzconfig.core.config_builder import node_directory
from bzzconfig.core.config_loader import IdentityMismatch, ParseFailed, new_config
from bzzconfig.core.config_store import CONFIG_FILENAME
from bzzconfig.core.identity import derive

CONTRACT = "0x" + "00" * 20


class TestConfigTamperDetection:
    """Direct file manipulation to simulate an attacker with disk access."""

    @pytest.fixture
    def seeded(self, base_path, private_key, identity) -> Path:
        """Create key A's config and return its file path."""
        new_config(base_path, CONTRACT, private_key, 1)
        return Path(node_directory(base_path, identity)) / CONFIG_FILENAME

    def _rewrite(self, path: Path, **changes) -> bytes:
        doc = json.loads(path.read_text())
        doc.update(changes)
        path.write_text(json.dumps(doc, indent=4))
        return path.read_bytes()

    def test_swapped_public_key_detected(
        self, seeded, base_path, private_key, other_private_key
    ):
        written = self._rewrite(
            seeded, PublicKey=derive(other_private_key).public_key_hex
        )
        with pytest.raises(IdentityMismatch, match="PublicKey"):
            new_config(base_path, CONTRACT, private_key, 1)
        assert seeded.read_bytes() == written

    def test_consistent_foreign_identity_detected(
        self, seeded, base_path, private_key, other_private_key
    ):
        """Both identity fields replaced coherently with another node's."""
        other = derive(other_private_key)
        written = self._rewrite(
            seeded, PublicKey=other.public_key_hex, BzzKey=other.bzz_key
        )
        with pytest.raises(IdentityMismatch):
            new_config(base_path, CONTRACT, private_key, 1)
        assert seeded.read_bytes() == written

    def test_uppercase_public_key_is_a_mismatch(self, seeded, base_path, private_key, identity):
        """Comparison is exact; no normalization hides an edited field."""
        self._rewrite(seeded, PublicKey=identity.public_key_hex.upper())
        with pytest.raises(IdentityMismatch):
            new_config(base_path, CONTRACT, private_key, 1)

    def test_smuggled_swap_key_ignored(self, seeded, base_path, private_key, other_private_key):
        doc = json.loads(seeded.read_text())
        doc["Swap"]["_private_key"] = "ff" * 32
        doc["Swap"]["PrivateKey"] = "ff" * 32
        seeded.write_text(json.dumps(doc))

        config = new_config(base_path, CONTRACT, private_key, 1)
        assert config.swap.private_key is private_key
        assert "PrivateKey" not in config.swap.to_document()

    @pytest.mark.parametrize(
        "garbage",
        [b"", b"\xff\xfe\x00", b"null", b'"text"', b"[" * 100_000 + b"]" * 100_000],
        ids=["empty", "binary", "null", "string", "deeply-nested"],
    )
    def test_garbage_rejected(self, seeded, base_path, private_key, garbage):
        seeded.write_bytes(garbage)
        with pytest.raises(ParseFailed):
            new_config(base_path, CONTRACT, private_key, 1)
        assert seeded.read_bytes() == garbage
