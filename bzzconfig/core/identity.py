"""Node identity derivation — secp256k1 key to public key, fingerprint, address.

Identity boundary
-----------------
The configuration layer is agnostic to where the private key comes from;
key management lives outside this package.  Given a key, three values are
derived:

1. **public key** — uncompressed X9.62 point (65 bytes, leading ``0x04``).
2. **fingerprint** — Keccak-256 of the public key encoding.  Names the
   node directory and is persisted as ``BzzKey`` for consistency checks.
3. **beneficiary address** — last 20 bytes of Keccak-256 over the public
   key without its ``0x04`` marker.  Handed to the swap collaborator.

All three are pure functions of the private key.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import BaseModel, ConfigDict

from bzzconfig.core.hasher import keccak256, strip_hex_prefix, to_hex

PRIVATE_KEY_SIZE = 32
ADDRESS_SIZE = 20


class NodeIdentity(BaseModel):
    """Values derived from a node's private key.

    Parameters
    ----------
    public_key:
        Uncompressed public key encoding (65 bytes).
    fingerprint:
        Keccak-256 digest of ``public_key`` (32 bytes).
    address:
        Beneficiary address (20 bytes).
    """

    model_config = ConfigDict(frozen=True)

    public_key: bytes
    fingerprint: bytes
    address: bytes

    @property
    def public_key_hex(self) -> str:
        """``0x``-prefixed public key, as persisted in ``PublicKey``."""
        return to_hex(self.public_key)

    @property
    def fingerprint_hex(self) -> str:
        """Bare fingerprint hex, used to name the node directory."""
        return self.fingerprint.hex()

    @property
    def bzz_key(self) -> str:
        """``0x``-prefixed fingerprint, as persisted in ``BzzKey``."""
        return to_hex(self.fingerprint)

    @property
    def address_hex(self) -> str:
        """``0x``-prefixed beneficiary address."""
        return to_hex(self.address)


def derive(private_key: ec.EllipticCurvePrivateKey) -> NodeIdentity:
    """Derive the public key encoding, fingerprint and beneficiary address.

    Raises
    ------
    ValueError
        If *private_key* is not a secp256k1 private key.
    """
    if not isinstance(private_key, ec.EllipticCurvePrivateKey):
        raise ValueError(
            f"expected an elliptic curve private key, got {type(private_key).__name__}"
        )
    if not isinstance(private_key.curve, ec.SECP256K1):
        raise ValueError(
            f"expected a secp256k1 key, got curve {private_key.curve.name}"
        )

    public_key = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    return NodeIdentity(
        public_key=public_key,
        fingerprint=keccak256(public_key),
        address=keccak256(public_key[1:])[-ADDRESS_SIZE:],
    )


def load_private_key(value: bytes | str) -> ec.EllipticCurvePrivateKey:
    """Build a secp256k1 private key from a raw 32-byte scalar.

    Parameters
    ----------
    value:
        Raw scalar bytes, or its hex rendering (``0x`` prefix optional,
        surrounding whitespace ignored).

    Raises
    ------
    ValueError
        If the value is not 32 bytes of hex or is outside the curve order.
    """
    if isinstance(value, str):
        raw = bytes.fromhex(strip_hex_prefix(value.strip()))
    else:
        raw = bytes(value)
    if len(raw) != PRIVATE_KEY_SIZE:
        raise ValueError(
            f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(raw)}"
        )
    return ec.derive_private_key(int.from_bytes(raw, "big"), ec.SECP256K1())
