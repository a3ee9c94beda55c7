"""Tests for operation-specific Rich renderers."""

from limitctl.output.renderers import render_quiet, render_result
from limitctl.services.prescription import PrescriptionService
from limitctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("compute", "INVALID_DATE_FORMAT", "Bad date"))
        assert "ERROR" in output
        assert "compute" in output
        assert "Bad date" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("compute", "INVALID_DATE_FORMAT", "Bad", input="31/02/2024")
        output = render_result(result, verbose=True)
        assert "input" in output
        assert "31/02/2024" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="compute"))
        assert "Unknown error" in output


# ── Compute rendering ────────────────────────────────────────────────


class TestComputeRenderer:
    def test_table_lists_tiers(self, service: PrescriptionService) -> None:
        output = render_result(service.compute("01/10/2022"))
        assert "OK" in output
        assert "01/10/2022" in output
        assert "Minor infraction (1 year)" in output
        assert "21/03/2024" in output
        assert "Medium infraction (2 years)" in output
        assert "22/04/2025" in output
        assert "Severe infraction (5 years)" in output
        assert "27/07/2028" in output

    def test_fields_use_single_space(self, service: PrescriptionService) -> None:
        output = render_result(service.compute("01/10/2022"), verbose=True)
        assert "  initial_date: 01/10/2022" in output
        assert "  base_deadline: 18/02/2023" in output
        assert "initial_date:  " not in output

    def test_verbose_shows_intermediate_dates(self, service: PrescriptionService) -> None:
        plain = render_result(service.compute("01/10/2022"))
        verbose = render_result(service.compute("01/10/2022"), verbose=True)
        assert "base_deadline" not in plain
        assert "base_deadline" in verbose
        assert "18/02/2023" in verbose

    def test_warnings_rendered(self, service: PrescriptionService) -> None:
        output = render_result(service.compute("01/07/2020"))
        assert "WARNING" in output
        assert "14/11/2021" in output

    def test_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="compute",
            data={"initial_date": "01/10/2022", "deadlines": []},
            meta={
                "telemetry": {
                    "name": "PrescriptionService.compute",
                    "duration_ms": 0.5,
                    "children": [
                        {"name": "prescription", "duration_ms": 0.4, "annotations": {"k": "v"}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "PrescriptionService.compute" in output
        assert "prescription" in output
        assert "k=v" in output


# ── Windows rendering ────────────────────────────────────────────────


class TestWindowsRenderer:
    def test_lists_windows_and_tiers(self, service: PrescriptionService) -> None:
        output = render_result(service.windows())
        assert "pandemic" in output
        assert "14/11/2021" in output
        assert "year-end" in output
        assert "skips 32 days" in output
        assert "1826" in output
        assert "-32 days if started 02/07..31/07" in output


# ── Generic / quiet ──────────────────────────────────────────────────


class TestGenericAndQuiet:
    def test_unknown_op_falls_back(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"answer": 42}))
        assert "OK" in output
        assert output.splitlines()[-1] == "  answer: 42"

    def test_warning_line(self, service: PrescriptionService) -> None:
        output = render_result(service.compute("01/07/2020"))
        assert "  WARNING Initiating date 01/07/2020" in output

    def test_quiet_without_deadlines(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="windows")) == "OK: windows"

    def test_quiet_error(self) -> None:
        output = render_quiet(_err("compute", "INVALID_DATE_FORMAT", "Bad"))
        assert output.startswith("ERROR: compute")
        assert "Bad" in output
