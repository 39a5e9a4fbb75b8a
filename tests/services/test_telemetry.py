"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

from designdemos.config.settings import DemoSettings
from designdemos.services.dispatch import DispatchService
from designdemos.services.result import ServiceResult
from designdemos.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("layers", 5)
        assert span.to_dict()["annotations"] == {"layers": 5}


class _Service:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("inner") as span:
            if span is not None:
                span.annotate("n", 1)
        return ServiceResult(ok=True, op="run")

    @traced
    def plain(self) -> int:
        return 7


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        assert _Service().run().meta is None

    def test_trace_span_outside_traced_call(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None

    def test_enabled_attaches_tree(self) -> None:
        enable_telemetry()
        result = _Service().run()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Service.run"
        assert tree["children"][0]["name"] == "inner"
        assert tree["children"][0]["annotations"] == {"n": 1}

    def test_non_result_passthrough(self) -> None:
        enable_telemetry()
        assert _Service().plain() == 7

    def test_no_active_span_after_call(self) -> None:
        enable_telemetry()
        _Service().run()
        assert get_current_span() is None

    def test_service_method_traced(self, settings: DemoSettings) -> None:
        enable_telemetry()
        result = DispatchService(settings).runtime()
        assert result.meta is not None
        assert result.meta["telemetry"]["children"][0]["name"] == "purr_runtime"
