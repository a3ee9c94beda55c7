"""PrescriptionRules — every constant the engine uses, as one frozen value."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from limitctl.domain.tiers import DEFAULT_TIERS, TierSpec
from limitctl.domain.windows import (
    PANDEMIC_WINDOW,
    YEAR_END_WINDOW,
    AnnualRange,
    FixedWindow,
    RecurringWindow,
)

GRACE_PERIOD_DAYS = 140

AUGUST_EXTENSION = AnnualRange(start_month=8, start_day=2, end_month=8, end_day=13)


class PrescriptionRules(BaseModel):
    """Calendar rules applied by :func:`~limitctl.domain.prescription.compute_prescription`.

    Attributes:
        fixed_windows: One-off windows; dates inside collapse to the target.
        recurring_windows: Yearly windows skipped while counting a term.
            They also snap the base deadline and remap tier deadlines.
        grace_period_days: Administrative period added before any tier term.
        extension_window: Initiating dates in this range push the base
            deadline forward by *extension_years*.
        extension_years: Size of that push.
        tiers: Tier terms, in output order.
    """

    model_config = {"frozen": True}

    fixed_windows: tuple[FixedWindow, ...] = (PANDEMIC_WINDOW,)
    recurring_windows: tuple[RecurringWindow, ...] = (YEAR_END_WINDOW,)
    grace_period_days: int = Field(default=GRACE_PERIOD_DAYS, ge=0)
    extension_window: AnnualRange | None = AUGUST_EXTENSION
    extension_years: int = Field(default=1, ge=0)
    tiers: tuple[TierSpec, ...] = DEFAULT_TIERS

    @model_validator(mode="after")
    def _check_tiers(self) -> PrescriptionRules:
        seen = [spec.tier for spec in self.tiers]
        if len(seen) != len(set(seen)):
            msg = "each infraction tier may appear only once"
            raise ValueError(msg)
        if any(spec.days < 0 for spec in self.tiers):
            msg = "tier terms must be non-negative"
            raise ValueError(msg)
        return self


DEFAULT_RULES = PrescriptionRules()
