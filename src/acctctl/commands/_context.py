"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the session's AccountRegistry and the
stdout/stderr routing of results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from acctctl.config.settings import AcctSettings
    from acctctl.services.registry import AccountRegistry
    from acctctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built lazily, so ``--help`` never creates one.
    """

    def __init__(self, settings: AcctSettings) -> None:
        self.settings = settings
        self._registry: AccountRegistry | None = None

        from acctctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> AccountRegistry:
        """The session registry (created on first access)."""
        if self._registry is None:
            from acctctl.services.registry import AccountRegistry

            self._registry = AccountRegistry(
                max_suggestions=self.settings.registry.max_suggestions,
                mask_char=self.settings.display.mask_char,
            )
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr, then exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
