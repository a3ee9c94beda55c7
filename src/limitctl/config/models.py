"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, limitctl.toml only contains
overrides. An empty (or missing) file reproduces the built-in rules.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, model_validator

from limitctl.domain.rules import GRACE_PERIOD_DAYS, PrescriptionRules
from limitctl.domain.tiers import DEFAULT_TIERS
from limitctl.domain.windows import PANDEMIC_WINDOW, YEAR_END_WINDOW, FixedWindow

# --- limitctl.toml sections ---


class PandemicWindowConfig(BaseModel):
    """[rules.pandemic_window] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    start: date = PANDEMIC_WINDOW.start
    end: date = PANDEMIC_WINDOW.end
    target: date = PANDEMIC_WINDOW.target

    @model_validator(mode="after")
    def _check_order(self) -> PandemicWindowConfig:
        if self.start > self.end:
            msg = f"pandemic_window: start {self.start} is after end {self.end}"
            raise ValueError(msg)
        return self


class TierDaysConfig(BaseModel):
    """[rules.tier_days] section."""

    model_config = {"frozen": True}

    minor: int = Field(default=DEFAULT_TIERS[0].days, ge=0)
    medium: int = Field(default=DEFAULT_TIERS[1].days, ge=0)
    severe: int = Field(default=DEFAULT_TIERS[2].days, ge=0)


class RulesConfig(BaseModel):
    """[rules] section."""

    model_config = {"frozen": True}

    grace_period_days: int = Field(default=GRACE_PERIOD_DAYS, ge=0)
    suspension_skip_days: int = Field(default=YEAR_END_WINDOW.skip_days, ge=1)
    pandemic_window: PandemicWindowConfig = Field(default_factory=PandemicWindowConfig)
    tier_days: TierDaysConfig = Field(default_factory=TierDaysConfig)

    def to_rules(self) -> PrescriptionRules:
        """Build the engine rules these settings describe."""
        fixed: tuple[FixedWindow, ...] = ()
        if self.pandemic_window.enabled:
            fixed = (
                FixedWindow(
                    name=PANDEMIC_WINDOW.name,
                    start=self.pandemic_window.start,
                    end=self.pandemic_window.end,
                    target=self.pandemic_window.target,
                ),
            )
        year_end = YEAR_END_WINDOW.model_copy(update={"skip_days": self.suspension_skip_days})
        days = self.tier_days.model_dump()
        tiers = tuple(
            spec.model_copy(update={"days": days[str(spec.tier)]}) for spec in DEFAULT_TIERS
        )
        return PrescriptionRules(
            fixed_windows=fixed,
            recurring_windows=(year_end,),
            grace_period_days=self.grace_period_days,
            tiers=tiers,
        )

