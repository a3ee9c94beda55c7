"""Prescription engine — initiating date in, three tier deadlines out.

Pipeline (fixed order):
  NORMALIZE → GRACE PERIOD → EXTENSION → SNAP → TIER FAN-OUT

INVARIANT: pure. No I/O and no state shared between calls; every
PrescriptionResult is a fresh value.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from pydantic import BaseModel

from limitctl.domain.daycount import add_days, add_years
from limitctl.domain.rules import DEFAULT_RULES, PrescriptionRules
from limitctl.domain.tiers import TIER_LABELS, InfractionTier, TierSpec
from limitctl.domain.windows import adjust_fixed_windows

logger = logging.getLogger(__name__)


class PrescriptionResult(BaseModel):
    """Deadlines computed for one initiating date.

    Attributes:
        initial_date: Date as supplied by the caller.
        normalized_date: Date after the fixed windows were applied.
        base_deadline: End of the grace period, after extension and snap.
        deadlines: Deadline per tier, in rule order.
    """

    model_config = {"frozen": True}

    initial_date: date
    normalized_date: date
    base_deadline: date
    deadlines: dict[InfractionTier, date]

    def __getitem__(self, tier: InfractionTier) -> date:
        return self.deadlines[tier]

    def labelled(self) -> dict[str, date]:
        """Deadlines keyed by their display label."""
        return {TIER_LABELS[tier]: d for tier, d in self.deadlines.items()}


def compute_base_deadline(
    normalized: date,
    initial: date,
    rules: PrescriptionRules = DEFAULT_RULES,
) -> date:
    """End of the grace period that every tier term starts from.

    Counting starts at *normalized*; the extension window is matched
    against the calendar date the infraction was initiated on.
    """
    base = add_days(normalized, rules.grace_period_days, consider_suspension=False, rules=rules)

    extension = rules.extension_window
    if extension is not None and extension.contains(initial):
        base = add_years(base, rules.extension_years)
        logger.debug("Extension window hit for %s; base moved to %s", initial, base)

    for window in rules.recurring_windows:
        base = window.snap_to_reopening(base)
    return base


def compute_tier_deadline(
    base: date,
    spec: TierSpec,
    initial: date,
    rules: PrescriptionRules = DEFAULT_RULES,
) -> date:
    """Deadline for one tier counted from *base*."""
    deadline = add_days(
        base,
        spec.days,
        consider_suspension=spec.applies_suspension_skip,
        rules=rules,
    )
    for window in rules.recurring_windows:
        deadline = window.reopen_preserving_offset(deadline)

    correction = spec.correction
    if correction is not None and correction.window.contains(initial):
        deadline += timedelta(days=correction.days)
        logger.debug("Applied %+d day correction to %s tier", correction.days, spec.tier)
    return deadline


def compute_prescription(
    initial: date,
    rules: PrescriptionRules = DEFAULT_RULES,
) -> PrescriptionResult:
    """Compute the deadline of every tier for an infraction initiated on *initial*."""
    normalized = adjust_fixed_windows(initial, rules.fixed_windows)
    base = compute_base_deadline(normalized, initial, rules)
    deadlines = {
        spec.tier: compute_tier_deadline(base, spec, initial, rules) for spec in rules.tiers
    }
    return PrescriptionResult(
        initial_date=initial,
        normalized_date=normalized,
        base_deadline=base,
        deadlines=deadlines,
    )
