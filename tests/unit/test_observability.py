"""Unit tests for logging, tracing and metrics setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from opentelemetry import trace

from complex_obs.infrastructure.config import Config
from complex_obs.infrastructure.logging import get_logger, setup_logging
from complex_obs.infrastructure.metrics import get_metrics
from complex_obs.infrastructure.tracing import setup_tracing, trace_span


@pytest.fixture
def restore_logging():
    """Put root logging and structlog back after a test reconfigures them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.unit
class TestLogging:
    """Structured logging configuration."""

    def test_json_output(self, capsys, restore_logging) -> None:
        setup_logging(level="INFO", log_format="json")

        get_logger("text_handler").info("complex_obs_saved", filename="a.txt")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "complex_obs_saved"
        assert entry["filename"] == "a.txt"
        assert entry["component"] == "text_handler"
        assert entry["service"] == "complex_obs"
        assert entry["level"] == "info"

    def test_level_filtering(self, capsys, restore_logging) -> None:
        setup_logging(level="WARNING", log_format="json")

        get_logger().info("hidden")
        get_logger().warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_initial_context(self) -> None:
        logger = get_logger("storage", directory="/tmp/x")
        assert logger is not None


@pytest.mark.unit
class TestTracing:
    """Tracing setup and spans."""

    def test_setup_tracing_without_exporters(self) -> None:
        tracer = setup_tracing(Config())
        assert tracer is not None

    def test_console_export_is_opt_in(self) -> None:
        assert Config().observability.trace_console_export is False
        config = Config(observability={"trace_console_export": True})
        assert setup_tracing(config) is not None

    def test_trace_span(self) -> None:
        with trace_span("unit.span", {"obs.uuid": "u-1", "view": None}) as span:
            assert isinstance(span, trace.Span)


@pytest.mark.unit
class TestMetricsSingleton:
    def test_get_metrics_returns_same_instance(self) -> None:
        assert get_metrics() is get_metrics()
