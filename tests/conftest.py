# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for logbridge tests."""

import logging
from unittest.mock import Mock

import pytest

from logbridge import shutdown_executor, stop_watching


@pytest.fixture(autouse=True)
def restore_logging_state():
    """Undo engine configuration and stop background work after each test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    stop_watching()
    shutdown_executor(wait=True)
    for handler in root.handlers[:]:
        # pytest manages its own capture handlers per test phase
        if handler in saved_handlers or type(handler).__module__.startswith("_pytest"):
            continue
        root.removeHandler(handler)
        handler.close()
    root.setLevel(saved_level)


@pytest.fixture
def engine_logger():
    """Engine logger test double exposing the four emission methods."""
    return Mock(spec=["debug", "info", "warning", "error"])
