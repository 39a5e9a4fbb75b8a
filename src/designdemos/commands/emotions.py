"""Command: the emotion scale used for mood faces."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from designdemos.commands._base import DemoCommand

if TYPE_CHECKING:
    from designdemos.commands._context import AppContext


@click.command(
    cls=DemoCommand,
    examples="""\
  designdemos emotions
  designdemos --json emotions""",
)
@click.pass_obj
def emotions(app: AppContext) -> None:
    """Show each mood face with the reading where it begins."""
    from designdemos.services.gauge import GaugeService

    app.emit(GaugeService(app.settings).emotions())
