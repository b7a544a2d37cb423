"""Standalone command: password strength check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand
from acctctl.services.preview import check_password

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl check 'S3cur3Pa$$'
  acctctl --json check mypassword1""",
)
@click.argument("password")
@click.pass_obj
def check(app: AppContext, password: str) -> None:
    """Check PASSWORD against the strength policy (exit 1 when weak)."""
    app.emit(check_password(password))
