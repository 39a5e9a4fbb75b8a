"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns logging setup, lazy plugin loading, and result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from designdemos.config.logging import configure_logging
from designdemos.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from designdemos.config.settings import DemoSettings
    from designdemos.plugins.manager import PluginManager
    from designdemos.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use so ``--help`` and the dispatch
    commands never import plugin code.
    """

    def __init__(self, settings: DemoSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from designdemos.services.telemetry import enable_telemetry

            enable_telemetry()

    def load_plugins(self) -> PluginManager:
        """Discover plugins once and register their gauge styles."""
        if self._plugins is None:
            from designdemos.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)
