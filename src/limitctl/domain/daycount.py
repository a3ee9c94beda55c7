"""Day arithmetic that honours suspension windows.

INVARIANT: days inside an accepted suspension jump never consume the
day budget. The budget only shrinks on a real one-day step.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from limitctl.domain.rules import DEFAULT_RULES, PrescriptionRules
from limitctl.domain.windows import adjust_fixed_windows, in_any_window

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def add_days(
    start: date,
    count: int,
    *,
    consider_suspension: bool = False,
    rules: PrescriptionRules = DEFAULT_RULES,
) -> date:
    """Advance *start* by *count* counted days.

    Without *consider_suspension* this is plain ``start + count``. With it,
    the walk proceeds one day at a time; on first entering an occurrence of
    a recurring window it jumps that window's ``skip_days`` without spending
    budget. A jump that would land inside a window is rolled back and
    replaced by a single counted step.

    The fixed windows are applied to the final date in both cases.

    Raises:
        ValueError: If *count* is negative.
    """
    if count < 0:
        msg = f"day count must be non-negative, got {count}"
        raise ValueError(msg)

    if not consider_suspension or not rules.recurring_windows:
        return adjust_fixed_windows(start + timedelta(days=count), rules.fixed_windows)

    current = start
    remaining = count
    # window index -> starting year of the last occurrence already jumped
    seen_periods: dict[int, int] = {}

    while remaining > 0:
        index, window = next(
            ((i, w) for i, w in enumerate(rules.recurring_windows) if w.contains(current)),
            (-1, None),
        )
        if window is not None and seen_periods.get(index) != window.period_key(current):
            seen_periods[index] = window.period_key(current)
            landing = current + timedelta(days=window.skip_days)
            if in_any_window(landing, rules.recurring_windows):
                logger.debug("Jump from %s lands in a window at %s; stepping", current, landing)
                current += _ONE_DAY
                remaining -= 1
            else:
                logger.debug("Skipped %s window: %s -> %s", window.name, current, landing)
                current = landing
        else:
            current += _ONE_DAY
            remaining -= 1

    return adjust_fixed_windows(current, rules.fixed_windows)


def add_years(d: date, years: int) -> date:
    """Move *d* by whole calendar years; Feb-29 rolls over to Mar-01."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return date(d.year + years, 3, 1)
