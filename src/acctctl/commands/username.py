"""Standalone commands: username normalization preview and suggestions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand
from acctctl.services.preview import preview_username, suggest_usernames

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl normalize "Mary  Jane!"
  acctctl normalize jastine --taken jastine --taken jastine1""",
)
@click.argument("raw")
@click.option("--taken", multiple=True, help="Already-assigned username (repeatable).")
@click.pass_obj
def normalize(app: AppContext, raw: str, taken: tuple[str, ...]) -> None:
    """Show the canonical username RAW would receive."""
    app.emit(preview_username(raw, frozenset(taken)))


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl suggest jastine --taken jastine --taken jastine1 -n 2""",
)
@click.argument("base")
@click.option("--taken", multiple=True, help="Already-assigned username (repeatable).")
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Number of suggestions (default: [registry] max_suggestions).",
)
@click.pass_obj
def suggest(app: AppContext, base: str, taken: tuple[str, ...], limit: int | None) -> None:
    """Suggest free alternatives to BASE."""
    if limit is None:
        limit = app.settings.registry.max_suggestions
    app.emit(suggest_usernames(base, frozenset(taken), limit))
