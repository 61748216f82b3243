# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for StdlibLoggerAdapter severity dispatch."""

import logging
from dataclasses import dataclass, field
from typing import Any

import pytest

from logbridge import (
    LogMessage,
    Logger,
    MessageSeverity,
    StdlibLoggerAdapter,
    get_engine_logger,
)


@dataclass
class PlainMessage:
    """Message from a caller that does not use LogMessage."""

    severity: Any
    format: str
    values: list[Any] = field(default_factory=list)


class TestDispatch:
    """Tests for routing messages to engine logger methods."""

    @pytest.mark.parametrize(
        "severity,method",
        [
            (MessageSeverity.DEBUG, "debug"),
            (MessageSeverity.INFORMATIONAL, "info"),
            (MessageSeverity.WARNING, "warning"),
            (MessageSeverity.ERROR, "error"),
        ],
    )
    def test_severity_selects_method(self, engine_logger, severity, method):
        """Test each severity is forwarded to exactly its engine method."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(LogMessage(severity, "value {0}", (7,)))

        getattr(engine_logger, method).assert_called_once_with("value {0}", 7)
        assert len(engine_logger.method_calls) == 1

    def test_warning_forwarded_verbatim(self, engine_logger):
        """Test format and values reach the engine untouched."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(PlainMessage(MessageSeverity.WARNING, "retrying {0} of {1}", [1, 3]))

        engine_logger.warning.assert_called_once_with("retrying {0} of {1}", 1, 3)
        engine_logger.debug.assert_not_called()
        engine_logger.info.assert_not_called()
        engine_logger.error.assert_not_called()

    def test_values_are_not_copied_or_converted(self, engine_logger):
        """Test the same value objects are passed through."""
        adapter = StdlibLoggerAdapter(engine_logger)
        payload = {"order": 42}

        adapter.log(LogMessage.error("failed: {0}", payload))

        args = engine_logger.error.call_args.args
        assert args[1] is payload

    def test_plain_integer_severity_is_mapped(self, engine_logger):
        """Test an int equal to a mapped severity value is dispatched."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(PlainMessage(int(MessageSeverity.ERROR), "boom"))

        engine_logger.error.assert_called_once_with("boom")

    def test_unmapped_severity_is_dropped(self, engine_logger):
        """Test an unmapped severity emits nothing and raises nothing."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(PlainMessage(9999, "x"))

        assert engine_logger.method_calls == []

    @pytest.mark.parametrize("severity", [0, -1, "warning", None, 2.5])
    def test_other_unmapped_values_are_dropped(self, engine_logger, severity):
        """Test values outside the enumeration are dropped."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(PlainMessage(severity, "x"))

        assert engine_logger.method_calls == []

    def test_unhashable_severity_is_dropped(self, engine_logger):
        """Test an unhashable severity is treated as unmapped."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log(PlainMessage(["not", "a", "severity"], "x"))

        assert engine_logger.method_calls == []

    def test_engine_errors_propagate(self, engine_logger):
        """Test a failing engine call surfaces unchanged to the caller."""
        failure = RuntimeError("sink unavailable")
        engine_logger.info.side_effect = failure
        adapter = StdlibLoggerAdapter(engine_logger)

        with pytest.raises(RuntimeError) as exc_info:
            adapter.log(LogMessage.info("hello"))

        assert exc_info.value is failure


class TestAdapter:
    """Tests for adapter construction and engine integration."""

    def test_is_logger(self, engine_logger):
        """Test the adapter implements the Logger interface."""
        adapter = StdlibLoggerAdapter(engine_logger)

        assert isinstance(adapter, Logger)
        assert adapter.logger is engine_logger

    def test_construction_emits_nothing(self, engine_logger):
        """Test creating an adapter has no side effects on the engine logger."""
        StdlibLoggerAdapter(engine_logger)

        assert engine_logger.method_calls == []

    def test_brace_style_engine_logger(self, caplog):
        """Test messages reach stdlib handlers rendered with str.format."""
        caplog.set_level(logging.DEBUG, logger="tests.adapter.brace")
        adapter = StdlibLoggerAdapter(get_engine_logger("tests.adapter.brace"))

        adapter.log(LogMessage.warning("retrying {0} of {1}", 1, 3))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.name == "tests.adapter.brace"
        assert record.getMessage() == "retrying 1 of 3"

    def test_percent_style_engine_logger(self, caplog):
        """Test a plain logging.Logger receives printf-style arguments."""
        caplog.set_level(logging.DEBUG, logger="tests.adapter.percent")
        adapter = StdlibLoggerAdapter(logging.getLogger("tests.adapter.percent"))

        adapter.log(LogMessage.debug("processed %d items", 5))

        assert caplog.records[0].levelno == logging.DEBUG
        assert caplog.records[0].getMessage() == "processed 5 items"

    def test_engine_level_filtering_applies(self, caplog):
        """Test the engine, not the adapter, decides what is filtered."""
        caplog.set_level(logging.ERROR, logger="tests.adapter.filtered")
        adapter = StdlibLoggerAdapter(get_engine_logger("tests.adapter.filtered"))

        adapter.log(LogMessage.info("hidden"))
        adapter.log(LogMessage.error("shown"))

        assert [r.getMessage() for r in caplog.records] == ["shown"]
