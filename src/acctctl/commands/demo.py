"""Standalone command: run the sample provisioning session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand
from acctctl.services.demo import run_demo

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


@click.command(cls=AcctCommand)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Create the sample accounts and print each outcome."""
    app.emit(run_demo(app.registry))
