"""``bzzconfig identity`` — show the values derived from a node key."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from bzzconfig.cli.commands._node import read_private_key
from bzzconfig.core.config_builder import node_directory
from bzzconfig.core.identity import derive
from bzzconfig.settings import NodeSettings

console = Console()


def identity_cmd(
    key_file: Path = typer.Option(
        None,
        "--key-file",
        "-k",
        help="File holding the hex-encoded secp256k1 private key.",
    ),
    datadir: Path = typer.Option(
        None,
        "--datadir",
        "-d",
        help="Base data directory (default: BZZCONFIG_DATADIR or ~/.livepeer).",
    ),
) -> None:
    """Print public key, fingerprint, beneficiary and node directory.

    Does not touch the filesystem beyond reading the key file.
    """
    settings = NodeSettings()
    identity = derive(read_private_key(key_file, settings))
    directory = node_directory(datadir or settings.resolved_datadir, identity)

    for label, value in (
        ("public key", identity.public_key_hex),
        ("fingerprint", identity.fingerprint_hex),
        ("beneficiary", identity.address_hex),
        ("directory", directory),
    ):
        console.print(f"{label}: {value}", soft_wrap=True, markup=False, highlight=False)
