"""Command: compute prescription deadlines for an initiating date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from limitctl.commands._base import LimitCommand

if TYPE_CHECKING:
    from limitctl.commands._context import AppContext


@click.command(
    cls=LimitCommand,
    examples="""\
  limitctl compute 01/10/2022
  limitctl --json compute 15/07/2021
  limitctl -q compute 05/08/2022
  limitctl -v compute 01/07/2020""",
)
@click.argument("initial_date")
@click.pass_obj
def compute(app: AppContext, initial_date: str) -> None:
    """Compute deadlines for INITIAL_DATE (DD/MM/YYYY)."""
    app.emit(app.service.compute(initial_date))
