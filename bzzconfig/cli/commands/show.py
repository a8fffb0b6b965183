"""``bzzconfig show`` — print an existing node config as a table."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from bzzconfig.cli.commands._node import read_private_key
from bzzconfig.core import config_store
from bzzconfig.core.config_builder import node_directory
from bzzconfig.core.config_loader import ConfigLoader
from bzzconfig.core.config_store import ConfigError
from bzzconfig.settings import NodeSettings

console = Console()


def _rows(document: dict[str, Any], prefix: str = ""):
    for key, value in document.items():
        if isinstance(value, dict):
            yield from _rows(value, prefix=f"{prefix}{key}.")
        else:
            yield f"{prefix}{key}", str(value)


def show_cmd(
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
    """Validate and display the node config without creating one."""
    settings = NodeSettings()
    private_key = read_private_key(key_file, settings)
    base_path = datadir or settings.resolved_datadir

    loader = ConfigLoader(
        base_path, settings.contract, private_key, settings.network_id
    )
    target = config_store.config_path(node_directory(base_path, loader.identity))
    if not target.exists():
        console.print(f"[yellow]No config at {target}.[/yellow] Run 'bzzconfig init' first.")
        raise typer.Exit(code=1)

    try:
        config = loader.load()
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title="Node Config")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in _rows(config.to_document()):
        table.add_row(key, value)
    console.print(table)
