"""Subcommand modules for acctctl.

register_commands() imports lazily so ``acctctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the create group and the standalone commands on *cli*."""
    # --- Groups ---
    from acctctl.commands.create import create

    cli.add_command(create)

    # --- Standalone commands ---
    from acctctl.commands.check import check
    from acctctl.commands.demo import demo
    from acctctl.commands.username import normalize, suggest

    cli.add_command(check)
    cli.add_command(normalize)
    cli.add_command(suggest)
    cli.add_command(demo)
