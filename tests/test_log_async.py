# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for asynchronous logging on the shared worker pool."""

import threading
from concurrent.futures import CancelledError, Future, wait

import pytest

from logbridge import LogMessage, SilentLogger, StdlibLoggerAdapter


class TestLogAsync:
    """Tests for Logger.log_async."""

    def test_completes_after_single_emission(self, engine_logger):
        """Test a live signal lets the message through exactly once."""
        adapter = StdlibLoggerAdapter(engine_logger)

        future = adapter.log_async(LogMessage.warning("retrying {0} of {1}", 1, 3), threading.Event())

        assert isinstance(future, Future)
        assert future.result(timeout=5) is None
        engine_logger.warning.assert_called_once_with("retrying {0} of {1}", 1, 3)
        assert len(engine_logger.method_calls) == 1

    def test_without_cancellation_signal(self, engine_logger):
        """Test log_async works when no signal is given."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log_async(LogMessage.info("ready")).result(timeout=5)

        engine_logger.info.assert_called_once_with("ready")

    def test_cancelled_before_start(self, engine_logger):
        """Test an already-set signal fails the future and emits nothing."""
        adapter = StdlibLoggerAdapter(engine_logger)
        cancel = threading.Event()
        cancel.set()

        future = adapter.log_async(LogMessage.debug("ping"), cancel)

        with pytest.raises(CancelledError):
            future.result(timeout=5)
        assert engine_logger.method_calls == []

    def test_cancel_during_emission_has_no_effect(self, engine_logger):
        """Test cancelling after the work started still logs the message."""
        started = threading.Event()
        release = threading.Event()

        def slow_info(*args):
            started.set()
            release.wait(5)

        engine_logger.info.side_effect = slow_info
        adapter = StdlibLoggerAdapter(engine_logger)
        cancel = threading.Event()

        future = adapter.log_async(LogMessage.info("slow {0}", 1), cancel)
        assert started.wait(5)
        cancel.set()
        release.set()

        assert future.result(timeout=5) is None
        engine_logger.info.assert_called_once_with("slow {0}", 1)

    def test_engine_error_carried_by_future(self, engine_logger):
        """Test engine failures propagate through the future unchanged."""
        failure = OSError("disk full")
        engine_logger.error.side_effect = failure
        adapter = StdlibLoggerAdapter(engine_logger)

        future = adapter.log_async(LogMessage.error("write failed"))

        assert future.exception(timeout=5) is failure

    def test_unmapped_severity_completes_without_emission(self, engine_logger):
        """Test the async path drops unmapped severities like the sync path."""
        adapter = StdlibLoggerAdapter(engine_logger)

        adapter.log_async(LogMessage(9999, "x")).result(timeout=5)

        assert engine_logger.method_calls == []

    def test_does_not_block_caller(self, engine_logger):
        """Test the caller gets the future before the emission finishes."""
        release = threading.Event()
        engine_logger.info.side_effect = lambda *args: release.wait(5)
        adapter = StdlibLoggerAdapter(engine_logger)

        future = adapter.log_async(LogMessage.info("queued"))

        assert not future.done()
        release.set()
        future.result(timeout=5)

    def test_concurrent_calls_all_emitted(self, engine_logger):
        """Test every concurrent call is logged, in no particular order."""
        adapter = StdlibLoggerAdapter(engine_logger)

        futures = [adapter.log_async(LogMessage.info("item {0}", i)) for i in range(50)]
        done, not_done = wait(futures, timeout=10)

        assert not not_done
        assert all(f.exception() is None for f in done)
        logged = sorted(call.args[1] for call in engine_logger.info.call_args_list)
        assert logged == list(range(50))

    def test_silent_logger_inherits_log_async(self):
        """Test log_async is shared by every Logger implementation."""
        logger = SilentLogger()

        logger.log_async(LogMessage.info("stored")).result(timeout=5)

        assert logger.has_message("stored")
