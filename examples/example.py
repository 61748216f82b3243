#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the logbridge package.

This script demonstrates configuring the logging engine once and logging
severity-tagged messages through the Logger interface.
"""

import io
import threading
from concurrent.futures import CancelledError

from logbridge import (
    LogMessage,
    MessageSeverity,
    configure_default,
    configure_from_stream,
    create_logger,
    get_logger,
)

YAML_CONFIG = b"""\
formatters:
  plain:
    format: "%(levelname)s %(name)s: %(message)s"
handlers:
  console:
    class: logging.StreamHandler
    formatter: plain
    stream: ext://sys.stdout
loggers:
  example.orders:
    level: DEBUG
    handlers: [console]
    propagate: false
"""


class OrderService:
    """Stand-in application class used to name a logger."""


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("logbridge Examples")
    print("=" * 60)
    print()

    # Example 1: Default JSON configuration
    print("Example 1: Default JSON output on stdout")
    print("-" * 60)
    configure_default(level="INFO")
    logger = get_logger(OrderService)

    logger.log(LogMessage.info("Service started"))
    logger.log(LogMessage.warning("retrying {0} of {1}", 1, 3))
    logger.log(LogMessage.debug("This debug message won't appear (below INFO level)"))
    logger.log(LogMessage(9999, "Unmapped severities are dropped"))
    print()

    # Example 2: YAML configuration from a stream
    print("Example 2: Configuration read from a YAML stream")
    print("-" * 60)
    configure_from_stream(io.BytesIO(YAML_CONFIG))
    orders = get_logger("example.orders")

    orders.log(LogMessage.debug("Loaded {0} pending orders", 12))
    orders.log(LogMessage.error("Payment for order {0} failed: {1}", 1042, "card declined"))
    print()

    # Example 3: Asynchronous logging with cancellation
    print("Example 3: log_async with a cancellation signal")
    print("-" * 60)
    cancel = threading.Event()
    orders.log_async(LogMessage.info("Logged from the worker pool"), cancel).result()

    cancel.set()
    try:
        orders.log_async(LogMessage.info("Never logged"), cancel).result()
    except CancelledError:
        print("Cancelled before start: nothing was logged")
    print()

    # Example 4: Silent logger for testing
    print("Example 4: SilentLogger for testing")
    print("-" * 60)
    test_logger = create_logger(logger_type="silent", name="test-service")

    test_logger.log(LogMessage.info("Test message 1"))
    test_logger.log(LogMessage.warning("Test warning {0}", "w1"))

    print(f"Total messages captured: {len(test_logger.messages)}")
    print(f"Has 'Test warning w1': {test_logger.has_message('Test warning w1')}")
    print(f"Warning messages: {len(test_logger.get_messages(MessageSeverity.WARNING))}")
    print()

    print("=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
