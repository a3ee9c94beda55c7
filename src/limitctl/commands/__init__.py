"""Subcommand modules for limitctl.

Provides register_commands() which uses deferred imports to keep
``limitctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from limitctl.commands.compute import compute
    from limitctl.commands.windows import windows

    cli.add_command(compute)
    cli.add_command(windows)
