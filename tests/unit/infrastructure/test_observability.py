"""Unit tests for structlog configuration and correlation ids."""

import logging

import structlog

from src.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import resolve_log_level


class TestCorrelationId:
    def test_set_and_reset(self) -> None:
        token = set_correlation_id("req-1")
        try:
            assert get_correlation_id() == "req-1"
        finally:
            reset_correlation_id(token)

        assert get_correlation_id() == ""

    def test_generated_ids_are_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()

    def test_processor_adds_id(self) -> None:
        token = set_correlation_id("req-2")
        try:
            event = correlation_id_processor(None, "info", {"event": "judge_moved"})
        finally:
            reset_correlation_id(token)

        assert event["correlation_id"] == "req-2"

    def test_processor_keeps_explicit_id(self) -> None:
        token = set_correlation_id("req-3")
        try:
            event = correlation_id_processor(None, "info", {"correlation_id": "bound"})
        finally:
            reset_correlation_id(token)

        assert event["correlation_id"] == "bound"

    def test_processor_without_context(self) -> None:
        assert "correlation_id" not in correlation_id_processor(None, "info", {})


class TestConfigureStructlog:
    def test_level_names(self) -> None:
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(None) == logging.INFO
        assert resolve_log_level("chatty") == logging.INFO

    def test_production_renders_json(self) -> None:
        configure_structlog(environment="production", log_level="WARNING")
        try:
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        finally:
            structlog.reset_defaults()

    def test_development_renders_console(self) -> None:
        configure_structlog(environment="development")
        try:
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        finally:
            structlog.reset_defaults()
