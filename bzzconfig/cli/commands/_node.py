"""Shared helpers for commands that need the node key and settings."""

from __future__ import annotations

from pathlib import Path

import typer
from cryptography.hazmat.primitives.asymmetric import ec
from rich.console import Console

from bzzconfig.core.identity import load_private_key
from bzzconfig.settings import NodeSettings

console = Console(stderr=True)


def read_private_key(key_file: Path | None, settings: NodeSettings) -> ec.EllipticCurvePrivateKey:
    """Read a hex private key from *key_file* (or the configured key file).

    Exits with code 1 and a message when no usable key is found.
    """
    path = key_file or settings.key_file
    if path is None:
        console.print("[red]No key file given.[/red] Use --key-file or BZZCONFIG_KEY_FILE.")
        raise typer.Exit(code=1)
    path = path.expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read key file {path}:[/red] {e}")
        raise typer.Exit(code=1) from e
    try:
        return load_private_key(text)
    except ValueError as e:
        console.print(f"[red]Invalid private key in {path}:[/red] {e}")
        raise typer.Exit(code=1) from e
