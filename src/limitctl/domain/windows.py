"""Suspension windows as data.

Two shapes of window exist:
- FixedWindow: a one-off historical interval with a landing date. Any date
  inside it collapses onto the landing date (the pandemic suspension).
- RecurringWindow: a month/day interval repeating every year, possibly
  wrapping the year end (the Dec-20..Jan-20 suspension).

New suspension periods are added by appending descriptors to
:class:`~limitctl.domain.rules.PrescriptionRules`, never by new branches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

# Non-leap reference year for validating month/day bounds (rejects Feb-29).
_BOUND_CHECK_YEAR = 2001


class AnnualRange(BaseModel):
    """Inclusive month/day interval that repeats every year.

    When the start lies after the end (e.g. Dec-20..Jan-20) the range wraps
    the year end and each occurrence begins in the earlier calendar year.
    """

    model_config = {"frozen": True}

    start_month: int
    start_day: int
    end_month: int
    end_day: int

    @model_validator(mode="after")
    def _check_bounds(self) -> AnnualRange:
        # Raises ValueError (wrapped as ValidationError) on e.g. Apr-31.
        date(_BOUND_CHECK_YEAR, self.start_month, self.start_day)
        date(_BOUND_CHECK_YEAR, self.end_month, self.end_day)
        return self

    @property
    def wraps(self) -> bool:
        return (self.start_month, self.start_day) > (self.end_month, self.end_day)

    def contains(self, d: date) -> bool:
        md = (d.month, d.day)
        start = (self.start_month, self.start_day)
        end = (self.end_month, self.end_day)
        if self.wraps:
            return md >= start or md <= end
        return start <= md <= end

    def period_start(self, d: date) -> date:
        """First day of the occurrence that *d* belongs to (or would belong to)."""
        year = d.year
        if self.wraps and (d.month, d.day) < (self.start_month, self.start_day):
            year -= 1
        return date(year, self.start_month, self.start_day)

    def period_end(self, d: date) -> date:
        """Last day of the occurrence that *d* belongs to."""
        start = self.period_start(d)
        year = start.year + 1 if self.wraps else start.year
        return date(year, self.end_month, self.end_day)


class FixedWindow(BaseModel):
    """One-off suspension interval ``[start, end]`` with a landing *target*."""

    model_config = {"frozen": True}

    name: str
    start: date
    end: date
    target: date

    @model_validator(mode="after")
    def _check_order(self) -> FixedWindow:
        if self.start > self.end:
            msg = f"{self.name}: start {self.start} is after end {self.end}"
            raise ValueError(msg)
        return self

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    def adjust(self, d: date) -> date:
        """Collapse a date inside the window onto the landing target."""
        if not self.contains(d):
            return d
        extra_days = (self.target - d).days
        return d + timedelta(days=extra_days)


class RecurringWindow(BaseModel):
    """Yearly suspension period during which the prescriptive term stops.

    Attributes:
        name: Identifier used in logs and listings.
        span: The month/day interval, inclusive on both ends.
        skip_days: Days jumped over when a walk enters the period.
    """

    model_config = {"frozen": True}

    name: str
    span: AnnualRange
    skip_days: int = Field(default=32, ge=1)

    def contains(self, d: date) -> bool:
        return self.span.contains(d)

    def period_key(self, d: date) -> int:
        """Identify the occurrence containing *d* by its starting year."""
        return self.span.period_start(d).year

    def reopening(self, d: date) -> date:
        """Day after the occurrence containing *d* ends."""
        return self.span.period_end(d) + timedelta(days=1)

    def snap_to_reopening(self, d: date) -> date:
        """Move a date inside the window to the reopening day, dropping its offset."""
        if not self.contains(d):
            return d
        return self.reopening(d)

    def reopen_preserving_offset(self, d: date) -> date:
        """Remap a date inside the window past the reopening day.

        The distance from the occurrence's first day is kept, so Dec-20
        becomes Jan-21, Dec-25 becomes Jan-26 and Jan-20 becomes Feb-21.
        Results always fall outside the window, making this idempotent.
        """
        if not self.contains(d):
            return d
        days_passed = (d - self.span.period_start(d)).days
        return self.reopening(d) + timedelta(days=days_passed)


PANDEMIC_WINDOW = FixedWindow(
    name="pandemic",
    start=date(2020, 6, 29),
    end=date(2021, 11, 13),
    target=date(2021, 11, 14),
)

YEAR_END_WINDOW = RecurringWindow(
    name="year-end",
    span=AnnualRange(start_month=12, start_day=20, end_month=1, end_day=20),
    skip_days=32,
)


def adjust_fixed_windows(d: date, windows: Iterable[FixedWindow] = (PANDEMIC_WINDOW,)) -> date:
    """Apply every fixed window in order to *d*."""
    for window in windows:
        adjusted = window.adjust(d)
        if adjusted != d:
            logger.debug("Date %s moved to %s by %s window", d, adjusted, window.name)
        d = adjusted
    return d


def in_any_window(d: date, windows: Iterable[RecurringWindow]) -> bool:
    """Check whether *d* lies inside any of the recurring *windows*."""
    return any(w.contains(d) for w in windows)
