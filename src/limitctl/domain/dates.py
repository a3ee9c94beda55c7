"""Boundary parsing and formatting of DD/MM/YYYY dates.

The engine only ever sees ``datetime.date`` values; text is converted
here, before any arithmetic runs.
"""

from __future__ import annotations

import re
from datetime import date

DATE_PATTERN = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")

INVALID_DATE_MESSAGE = "Please enter a valid date in the format DD/MM/YYYY."


class InvalidDateFormat(ValueError):
    """Raised when text is not a real calendar date in DD/MM/YYYY form."""

    def __init__(self, text: str) -> None:
        super().__init__(INVALID_DATE_MESSAGE)
        self.text = text


def parse_date(text: str) -> date:
    """Parse ``DD/MM/YYYY`` into a date.

    Out-of-range days or months (e.g. ``31/02/2024``) are rejected rather
    than rolled over into the next month.

    Raises:
        InvalidDateFormat: If *text* is malformed or not a real date.
    """
    match = DATE_PATTERN.match(text.strip())
    if match is None:
        raise InvalidDateFormat(text)
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormat(text) from exc


def format_date(d: date) -> str:
    """Render *d* as zero-padded ``DD/MM/YYYY``."""
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"
