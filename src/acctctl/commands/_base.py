"""Click classes carrying an ``--examples`` flag.

Usage examples stay out of ``--help``; ``acctctl create --examples``
prints them on demand.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Turns an ``examples=`` keyword into an eager ``--examples`` option."""

    params: list[click.Parameter]

    def _attach_examples(self, examples: str | None) -> None:
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )


class AcctCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class AcctGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command()`` subcommands are AcctCommands."""

    command_class = AcctCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
