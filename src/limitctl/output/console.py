"""Rich Console factory and theme for limitctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LIMIT_THEME = Theme(
    {
        "limit.ok": "bold green",
        "limit.error": "bold red",
        "limit.warning": "bold yellow",
        "limit.op": "bold cyan",
        "limit.key": "dim",
        "limit.date": "bold",
        "limit.tier.minor": "green",
        "limit.tier.medium": "yellow",
        "limit.tier.severe": "red",
    }
)

_TIER_STYLES: dict[str, str] = {
    "minor": "limit.tier.minor",
    "medium": "limit.tier.medium",
    "severe": "limit.tier.severe",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LIMIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str) -> str:
    """Return the Rich style name for an infraction tier."""
    return _TIER_STYLES.get(tier, "")
