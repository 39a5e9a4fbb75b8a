"""Tests for ServiceResult, BaseService helpers, and payload contracts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from designdemos.config.settings import DemoSettings
from designdemos.services.base import BaseService
from designdemos.services.contracts import (
    GaugeRenderData,
    PurrCompileTimeData,
    RuntimeCase,
    dump_validated,
)
from designdemos.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="x")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_exit_code(self) -> None:
        assert ServiceResult(ok=True, op="x").exit_code == 0
        error = ServiceError(code=ErrorCode.UNKNOWN_STYLE, message="bad")
        assert ServiceResult(ok=False, op="x", error=error).exit_code == 1

    def test_unknown_error_code_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="NOPE", message="bad")  # type: ignore[arg-type]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(
            ok=False,
            op="x",
            error=ServiceError(code=ErrorCode.INVALID_INPUT, message="bad", detail={"k": 1}),
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result


class TestBaseService:
    def test_ok(self, settings: DemoSettings) -> None:
        result = BaseService(settings)._ok("op", {"a": 1}, warnings=["w"])
        assert result.ok
        assert result.data == {"a": 1}
        assert result.warnings == ["w"]

    def test_fail(self, settings: DemoSettings) -> None:
        result = BaseService(settings)._fail("op", ErrorCode.INVALID_MODEL, "msg", field="x")
        assert not result.ok
        assert result.error == ServiceError(
            code=ErrorCode.INVALID_MODEL, message="msg", detail={"field": "x"}
        )
        assert result.exit_code == 1


class TestContracts:
    def test_runtime_case_rejects_unknown_result(self) -> None:
        with pytest.raises(ValidationError):
            RuntimeCase(cat="a", owner="b", result="meow", purred=False, line="")  # type: ignore[arg-type]

    def test_compile_time_only_purrs(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(
                PurrCompileTimeData,
                {
                    "strategy": "compile-time",
                    "caption": "",
                    "cat": "feral",
                    "owner": "human",
                    "result": "hiss",
                    "line": "",
                },
            )

    def test_render_forbids_extra_keys(self) -> None:
        payload = {
            "style": "standard",
            "size": 200.0,
            "range": {"lower": 0.0, "upper": 10.0},
            "tick_values": [],
            "readings": [],
            "command_counts": {},
            "layer_counts": [],
            "layers": [],
        }
        assert dump_validated(GaugeRenderData, payload)["style"] == "standard"
        with pytest.raises(ValidationError):
            dump_validated(GaugeRenderData, {**payload, "surprise": 1})
