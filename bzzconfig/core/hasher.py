"""Hashing and hex-rendering helpers for node identity values.

Uses the legacy Keccak-256 ("SHA3" before FIPS-202 padding was fixed) so
that fingerprints match the ones written by earlier node sessions.
"""

from __future__ import annotations

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of raw bytes."""
    return keccak.new(digest_bits=256, data=data).digest()


def keccak256_hex(data: bytes) -> str:
    """Return the Keccak-256 hex digest of raw bytes (no prefix)."""
    return keccak256(data).hex()


def to_hex(data: bytes) -> str:
    """Render bytes as ``0x``-prefixed lowercase hex."""
    return "0x" + data.hex()


def strip_hex_prefix(value: str) -> str:
    """Strip a leading ``0x``/``0X`` from a hex string, if present."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value
