"""Subcommand modules for designdemos.

``register_commands()`` imports each command module when the root group
is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group.

    2 groups (have subcommands) + 1 standalone command.
    """
    # --- Groups ---
    from designdemos.commands.gauge import gauge
    from designdemos.commands.purr import purr

    cli.add_command(purr)
    cli.add_command(gauge)

    # --- Standalone commands ---
    from designdemos.commands.emotions import emotions

    cli.add_command(emotions)
