"""``designdemos`` entry point.

Global flags are resolved into ``DemoSettings`` once; every subcommand
receives the resulting ``AppContext`` through ``@click.pass_obj``.
"""

from __future__ import annotations

import click

from designdemos import __version__
from designdemos.commands import register_commands
from designdemos.commands._base import DemoGroup
from designdemos.commands._context import AppContext
from designdemos.config.settings import DemoSettings


@click.group(
    cls=DemoGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples="""\
  designdemos purr compile-time --cat feral --owner none
  designdemos gauge render --style uber --value 7.5
  designdemos --json gauge sweep --steps 4
  designdemos -c demos.toml emotions""",
)
@click.version_option(version=__version__, prog_name="designdemos")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print one line per result.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and service timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Cat dispatch rules and gauge rendering demonstrations."""
    ctx.obj = AppContext(DemoSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
