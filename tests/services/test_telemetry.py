"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from limitctl.services.prescription import PrescriptionService
from limitctl.services.result import ServiceResult
from limitctl.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("base_deadline", "2023-02-18")
        span.end()
        assert span.to_dict()["annotations"] == {"base_deadline": "2023-02-18"}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("parse") as span:
            assert span is None

    def test_no_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("parse") as span:
            assert span is None


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="x")

        assert op().meta is None

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            with trace_span("child") as span:
                assert span is not None
                assert get_current_span() is span
            return ServiceResult(ok=True, op="x", meta={"keep": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["keep"] == 1
        tree = result.meta["telemetry"]
        assert tree["children"][0]["name"] == "child"

    def test_exception_propagates(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            op()
        assert _current_span.get() is None

    def test_service_stages_recorded(self) -> None:
        enable_telemetry()
        result = PrescriptionService().compute("01/10/2022")
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "PrescriptionService.compute"
        names = [c["name"] for c in tree["children"]]
        assert names == ["parse", "prescription"]
        assert tree["children"][1]["annotations"]["base_deadline"] == "2023-02-18"
