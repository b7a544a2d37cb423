"""Command group: account creation (single account, JSON batch)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from acctctl.commands._base import AcctGroup
from acctctl.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


_CREATE_EXAMPLES = """\
  acctctl create account "Jastine " --password 'S3cur3Pa$$'
  acctctl create account JastineNicole
  acctctl create batch accounts.json"""


@click.group(cls=AcctGroup, examples=_CREATE_EXAMPLES)
@click.pass_obj
def create(app: AppContext) -> None:
    """Create accounts."""


@create.command(
    examples="""\
  acctctl create account "Jastine " --password 'S3cur3Pa$$'
  acctctl create account mochi            # prompts for the password"""
)
@click.argument("username")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    help="Account password (prompted, hidden, when omitted).",
)
@click.pass_obj
def account(app: AppContext, username: str, password: str) -> None:
    """Create one account, normalizing USERNAME."""
    app.emit(app.registry.create_account(username, password))


def _load_items(path: str) -> list[dict[str, Any]] | ServiceResult:
    """Read a batch file, or return a failed result describing why not."""
    try:
        items = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        message = f"Invalid JSON in {path}: {exc}"
    except (OSError, UnicodeDecodeError) as exc:
        message = f"Cannot read {path}: {exc}"
    else:
        if isinstance(items, list) and all(isinstance(i, dict) for i in items):
            return items
        message = "Batch file must contain a JSON array of objects"
    return ServiceResult(
        ok=False,
        op="create_batch",
        error=ServiceError(code=ErrorCode.INVALID_BATCH, message=message),
    )


@create.command(
    examples="""\
  acctctl create batch accounts.json
  # accounts.json: [{"username": "Jastine", "password": "S3cur3Pa$$"}]"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def batch(app: AppContext, file: str) -> None:
    """Create every account listed in FILE through one registry."""
    loaded = _load_items(file)
    if isinstance(loaded, ServiceResult):
        app.emit(loaded)
        return
    app.emit(app.registry.create_many(loaded))
