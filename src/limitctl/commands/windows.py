"""Command: show the suspension windows and tier terms in force."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from limitctl.commands._base import LimitCommand

if TYPE_CHECKING:
    from limitctl.commands._context import AppContext


@click.command(
    cls=LimitCommand,
    examples="""\
  limitctl windows
  limitctl --json windows
  limitctl -c ./limitctl.toml windows""",
)
@click.pass_obj
def windows(app: AppContext) -> None:
    """Show suspension windows, grace period, and tier terms."""
    app.emit(app.service.windows())
