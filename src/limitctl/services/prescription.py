"""PrescriptionService — text or date in, ServiceResult out.

Pipeline: PARSE → COMPUTE → REPORT
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from limitctl.domain.dates import InvalidDateFormat, format_date, parse_date
from limitctl.domain.prescription import PrescriptionResult, compute_prescription
from limitctl.domain.rules import DEFAULT_RULES, PrescriptionRules
from limitctl.domain.tiers import TIER_LABELS
from limitctl.domain.windows import AnnualRange
from limitctl.services.result import ServiceError, ServiceResult
from limitctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _format_range(span: AnnualRange) -> str:
    return f"{span.start_day:02d}/{span.start_month:02d}..{span.end_day:02d}/{span.end_month:02d}"


def _result_payload(result: PrescriptionResult) -> dict[str, Any]:
    return {
        "initial_date": format_date(result.initial_date),
        "normalized_date": format_date(result.normalized_date),
        "base_deadline": format_date(result.base_deadline),
        "deadlines": [
            {"tier": str(tier), "label": TIER_LABELS[tier], "date": format_date(d)}
            for tier, d in result.deadlines.items()
        ],
    }


class PrescriptionService:
    """Computes prescription deadlines under a fixed set of rules."""

    def __init__(self, rules: PrescriptionRules = DEFAULT_RULES) -> None:
        self._rules = rules

    @property
    def rules(self) -> PrescriptionRules:
        return self._rules

    @traced
    def compute(self, initial: str | date) -> ServiceResult:
        """Compute the three tier deadlines for an initiating date.

        *initial* may be a ``date`` or ``DD/MM/YYYY`` text; invalid text
        yields an ``INVALID_DATE_FORMAT`` error result.
        """
        op = "compute"

        with trace_span("parse") as span:
            if isinstance(initial, date):
                initial_date = initial
            else:
                try:
                    initial_date = parse_date(initial)
                except InvalidDateFormat as exc:
                    logger.debug("Rejected date input %r", exc.text)
                    return ServiceResult(
                        ok=False,
                        op=op,
                        error=ServiceError(
                            code="INVALID_DATE_FORMAT",
                            message=str(exc),
                            detail={"input": exc.text},
                        ),
                    )
            if span:
                span.annotate("initial_date", initial_date.isoformat())

        with trace_span("prescription") as span:
            result = compute_prescription(initial_date, self._rules)
            if span:
                span.annotate("base_deadline", result.base_deadline.isoformat())

        warnings: list[str] = []
        if result.normalized_date != result.initial_date:
            warnings.append(
                f"Initiating date {format_date(result.initial_date)} falls in a suspension "
                f"window; counting from {format_date(result.normalized_date)}"
            )

        logger.debug(
            "Computed deadlines for %s: %s",
            initial_date,
            {str(tier): d.isoformat() for tier, d in result.deadlines.items()},
        )
        return ServiceResult(ok=True, op=op, data=_result_payload(result), warnings=warnings)

    def windows(self) -> ServiceResult:
        """Describe the suspension windows, grace period, and tier terms in force."""
        rules = self._rules
        data: dict[str, Any] = {
            "fixed_windows": [
                {
                    "name": w.name,
                    "start": format_date(w.start),
                    "end": format_date(w.end),
                    "target": format_date(w.target),
                }
                for w in rules.fixed_windows
            ],
            "recurring_windows": [
                {"name": w.name, "range": _format_range(w.span), "skip_days": w.skip_days}
                for w in rules.recurring_windows
            ],
            "grace_period_days": rules.grace_period_days,
            "extension": (
                {"range": _format_range(rules.extension_window), "years": rules.extension_years}
                if rules.extension_window is not None
                else None
            ),
            "tiers": [
                {
                    "tier": str(spec.tier),
                    "label": spec.label,
                    "days": spec.days,
                    "suspension_skip": spec.applies_suspension_skip,
                    "correction": (
                        {
                            "range": _format_range(spec.correction.window),
                            "days": spec.correction.days,
                        }
                        if spec.correction is not None
                        else None
                    ),
                }
                for spec in rules.tiers
            ],
        }
        return ServiceResult(ok=True, op="windows", data=data)
