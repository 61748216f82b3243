# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger adapter for the standard library logging engine."""

import logging
from typing import Any

from .logger import Logger
from .message import Message
from .severity import MessageSeverity

# Severity -> name of the engine logger method that emits it
_EMITTERS: dict[MessageSeverity, str] = {
    MessageSeverity.DEBUG: "debug",
    MessageSeverity.ERROR: "error",
    MessageSeverity.INFORMATIONAL: "info",
    MessageSeverity.WARNING: "warning",
}


class StdlibLoggerAdapter(Logger):
    """Logger that forwards messages to an engine logger.

    The engine logger is any object with debug/info/warning/error methods
    taking (format, *values): a logging.Logger, a logging.LoggerAdapter such
    as BraceStyleLogger, or a test double.

    Each message is forwarded with its format and values untouched to the
    one method its severity selects. Messages with an unmapped severity are
    dropped without error. Exceptions raised by the engine logger propagate
    to the caller.

    Example:
        >>> from logbridge import LogMessage, StdlibLoggerAdapter, get_engine_logger
        >>> logger = StdlibLoggerAdapter(get_engine_logger("my-service"))
        >>> logger.log(LogMessage.warning("retrying {0} of {1}", 1, 3))
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter | Any):
        """Initialize the adapter.

        Args:
            logger: Pre-configured engine logger to forward messages to
        """
        self._logger = logger

    @property
    def logger(self) -> Any:
        """The wrapped engine logger."""
        return self._logger

    def log(self, message: Message) -> None:
        """Forward a message to the engine logger method for its severity.

        Args:
            message: The message to log
        """
        try:
            method_name = _EMITTERS.get(message.severity)
        except TypeError:
            # unhashable severity values are unmapped too
            return
        if method_name is None:
            return
        getattr(self._logger, method_name)(message.format, *message.values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._logger!r})"
