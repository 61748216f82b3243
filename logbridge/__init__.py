# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""logbridge: a small logging capability on top of the stdlib logging engine.

Code logs severity-tagged messages through the Logger interface; the
StdlibLoggerAdapter forwards each one to the matching method of a named
logging.Logger. The engine itself is configured once, explicitly, from a
mapping, file, stream or URI.

Example:
    >>> from logbridge import LogMessage, configure_default, get_logger
    >>>
    >>> configure_default(level="DEBUG")
    >>> logger = get_logger("my-service")
    >>> logger.log(LogMessage.warning("retrying {0} of {1}", 1, 3))
    >>>
    >>> # Log without blocking the caller
    >>> future = logger.log_async(LogMessage.info("Service started"))
    >>> future.result()
    >>>
    >>> # Create a silent logger for testing
    >>> from logbridge import create_logger
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.log(LogMessage.info("Test message"))
    >>> assert test_logger.has_message("Test message")
"""

__version__ = "0.1.0"

from .configuration import (
    ConfigFileWatcher,
    configure_default,
    configure_from_dict,
    configure_from_file,
    configure_from_stream,
    configure_from_uri,
    detect_config_format,
    stop_watching,
)
from .exceptions import ConfigurationError, LogBridgeError
from .executor import get_executor, shutdown_executor
from .factory import (
    create_logger,
    create_logger_from_dict,
    create_logger_from_file,
    create_logger_from_stream,
    create_logger_from_uri,
    get_logger,
)
from .formatters import JSONFormatter, create_default_log_config
from .logger import CancellationSignal, Logger
from .message import LogMessage, Message, render_message
from .severity import MessageSeverity
from .silent_logger import SilentLogger
from .stdlib_adapter import StdlibLoggerAdapter
from .style import BraceStyleLogger, get_engine_logger, logger_name_for

__all__ = [
    # Version
    "__version__",
    # Core interface
    "Logger",
    "CancellationSignal",
    "Message",
    "LogMessage",
    "MessageSeverity",
    "render_message",
    # Implementations
    "StdlibLoggerAdapter",
    "SilentLogger",
    # Engine loggers
    "BraceStyleLogger",
    "get_engine_logger",
    "logger_name_for",
    # Engine configuration
    "ConfigFileWatcher",
    "configure_default",
    "configure_from_dict",
    "configure_from_file",
    "configure_from_stream",
    "configure_from_uri",
    "detect_config_format",
    "stop_watching",
    "JSONFormatter",
    "create_default_log_config",
    # Factory
    "create_logger",
    "create_logger_from_dict",
    "create_logger_from_file",
    "create_logger_from_stream",
    "create_logger_from_uri",
    "get_logger",
    # Worker pool
    "get_executor",
    "shutdown_executor",
    # Errors
    "LogBridgeError",
    "ConfigurationError",
]
