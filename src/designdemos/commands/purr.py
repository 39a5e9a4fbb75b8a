"""Command group: the cat-purring dispatch demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from designdemos.commands._base import DemoGroup
from designdemos.domain.types import CatVariant, OwnerVariant

if TYPE_CHECKING:
    from designdemos.commands._context import AppContext


@click.group(
    cls=DemoGroup,
    examples="""\
  designdemos purr runtime
  designdemos purr compile-time
  designdemos purr compile-time --cat feral --owner none
  designdemos --json purr pairs""",
)
def purr() -> None:
    """Decide whether a cat purrs, at runtime or by construction."""


@purr.command(
    examples="""\
  designdemos purr runtime
  designdemos -q purr runtime""",
)
@click.pass_obj
def runtime(app: AppContext) -> None:
    """Run every (cat, owner) pair through the runtime rule."""
    from designdemos.services.dispatch import DispatchService

    app.emit(DispatchService(app.settings).runtime())


@purr.command(
    "compile-time",
    examples="""\
  designdemos purr compile-time
  designdemos purr compile-time --cat spoiled --owner human
  designdemos purr compile-time --cat feral --owner none""",
)
@click.option(
    "--cat",
    type=click.Choice([c.value for c in CatVariant]),
    default=CatVariant.SPOILED_INDOOR.value,
    show_default=True,
    help="Cat variant.",
)
@click.option(
    "--owner",
    type=click.Choice([o.value for o in OwnerVariant]),
    default=OwnerVariant.HUMAN.value,
    show_default=True,
    help="Owner variant.",
)
@click.pass_obj
def compile_time(app: AppContext, cat: str, owner: str) -> None:
    """Purr through a typed pairing; other pairs cannot be built."""
    from designdemos.services.dispatch import DispatchService

    svc = DispatchService(app.settings)
    app.emit(svc.compile_time(CatVariant(cat), OwnerVariant(owner)))


@purr.command(
    examples="""\
  designdemos purr pairs
  designdemos --json purr pairs""",
)
@click.pass_obj
def pairs(app: AppContext) -> None:
    """List the pairings the typed rule can express."""
    from designdemos.services.dispatch import DispatchService

    app.emit(DispatchService(app.settings).pairs())
