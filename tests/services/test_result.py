"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from limitctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="compute", data={"base_deadline": "18/02/2023"})
        assert result.ok is True
        assert result.op == "compute"
        assert result.data == {"base_deadline": "18/02/2023"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_DATE_FORMAT", message="Bad date")
        result = ServiceResult(ok=False, op="compute", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE_FORMAT"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="compute",
            data={"deadlines": [{"tier": "minor", "date": "21/03/2024"}]},
            meta={"duration_ms": 1},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["deadlines"][0]["date"] == "21/03/2024"
        assert parsed["meta"]["duration_ms"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="compute")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
