"""``bzzconfig init`` — load or create the node config for a key.

Derives the node directory from the key, creates ``config.json`` there with
defaults if it is missing, otherwise validates the existing one.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from bzzconfig.cli.commands._node import read_private_key
from bzzconfig.core.config_loader import ConfigLoader
from bzzconfig.core.config_store import ConfigError
from bzzconfig.settings import NodeSettings

console = Console()


def init_cmd(
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
    network_id: int = typer.Option(None, "--network-id", help="Network identifier."),
    contract: str = typer.Option(None, "--contract", help="Swap contract address."),
    rtmp_port: str = typer.Option(None, "--rtmp-port", help="RTMP port to persist."),
    ffmpeg_path: str = typer.Option(None, "--ffmpeg-path", help="ffmpeg binary path."),
) -> None:
    """Load the node config, creating it with defaults on first run."""
    settings = NodeSettings()
    private_key = read_private_key(key_file, settings)

    try:
        loader = ConfigLoader(
            datadir or settings.resolved_datadir,
            contract or settings.contract,
            private_key,
            network_id if network_id is not None else settings.network_id,
            rtmp_port=rtmp_port if rtmp_port is not None else settings.rtmp_port,
            ffmpeg_path=ffmpeg_path if ffmpeg_path is not None else settings.ffmpeg_path,
        )
        config = loader.load()
    except (ConfigError, ValueError) as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(code=1) from e

    status = (
        "[bold green]New node config created![/bold green]"
        if loader.created
        else "[bold green]Existing node config loaded.[/bold green]"
    )
    console.print()
    console.print(
        Panel(
            "\n".join([
                status,
                "",
                f"[bold]Directory:[/bold]    {config.path}",
                f"[bold]Fingerprint:[/bold]  {config.bzz_key}",
                f"[bold]Beneficiary:[/bold]  {config.swap.beneficiary}",
                f"[bold]Network ID:[/bold]   {config.network_id}",
                f"[bold]ENS root:[/bold]     {config.ens_root}",
            ]),
            title="[bold]bzzconfig[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
    console.print()

    # Print the directory plainly for scripting
    console.print(config.path, soft_wrap=True, markup=False, highlight=False)
