"""Infraction severity tiers and their prescriptive terms.

Each tier is bound to a base duration in days, whether the yearly
suspension jump applies while counting it, and an optional correction
keyed on the initiating date.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from limitctl.domain.windows import AnnualRange


class InfractionTier(StrEnum):
    """Severity classes of administrative infractions."""

    MINOR = "minor"
    MEDIUM = "medium"
    SEVERE = "severe"


TIER_LABELS: dict[InfractionTier, str] = {
    InfractionTier.MINOR: "Minor infraction (1 year)",
    InfractionTier.MEDIUM: "Medium infraction (2 years)",
    InfractionTier.SEVERE: "Severe infraction (5 years)",
}


class TierCorrection(BaseModel):
    """Shift applied to a tier deadline when the initiating date is in *window*."""

    model_config = {"frozen": True}

    window: AnnualRange
    days: int


class TierSpec(BaseModel):
    """Prescriptive term of one tier."""

    model_config = {"frozen": True}

    tier: InfractionTier
    days: int
    applies_suspension_skip: bool = True
    correction: TierCorrection | None = None

    @property
    def label(self) -> str:
        return TIER_LABELS[self.tier]


JULY_CORRECTION = TierCorrection(
    window=AnnualRange(start_month=7, start_day=2, end_month=7, end_day=31),
    days=-32,
)

DEFAULT_TIERS: tuple[TierSpec, ...] = (
    TierSpec(tier=InfractionTier.MINOR, days=365),
    TierSpec(tier=InfractionTier.MEDIUM, days=730, correction=JULY_CORRECTION),
    TierSpec(tier=InfractionTier.SEVERE, days=1826),
)
