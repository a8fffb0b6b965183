"""Main Typer application — imports and registers all CLI commands.

Entry point: ``bzzconfig`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from bzzconfig.cli.commands.identity import identity_cmd
from bzzconfig.cli.commands.init import init_cmd
from bzzconfig.cli.commands.show import show_cmd
from bzzconfig.logging_config import setup_logging
from bzzconfig.settings import NodeSettings

app = typer.Typer(
    name="bzzconfig",
    help="bzzconfig: identity-bound storage node configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="init", help="Load or create the node config for a key.")(init_cmd)
app.command(name="show", help="Display an existing node config.")(show_cmd)
app.command(name="identity", help="Show the identity derived from a key.")(identity_cmd)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(verbose=verbose, log_level=NodeSettings().log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
