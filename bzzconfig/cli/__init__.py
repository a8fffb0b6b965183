"""bzzconfig CLI — Typer-based command-line interface.

Provides the ``bzzconfig`` command with subcommands for creating or
validating a node config, displaying it, and inspecting the identity a key
maps to.

All output uses Rich for formatted terminal display.
"""
