# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract logger interface."""

from abc import ABC, abstractmethod
from concurrent.futures import CancelledError, Future
from typing import Protocol

from .executor import get_executor
from .message import Message


class CancellationSignal(Protocol):
    """Anything that can report a cancellation request, e.g. threading.Event."""

    def is_set(self) -> bool: ...


class Logger(ABC):
    """Abstract base class for loggers."""

    @abstractmethod
    def log(self, message: Message) -> None:
        """Log a message.

        Args:
            message: The message to log
        """
        pass

    def log_async(
        self,
        message: Message,
        cancellation: CancellationSignal | None = None,
    ) -> "Future[None]":
        """Log a message on the shared worker pool.

        The cancellation signal is checked once, when the work starts and
        before anything is emitted. A request made after that point does not
        stop the message from being logged.

        Args:
            message: The message to log
            cancellation: Optional signal; if already set when the work
                starts, nothing is logged

        Returns:
            Future that completes after the message is logged, or fails with
            CancelledError, or with whatever log() raised
        """
        return get_executor().submit(self._log_unless_cancelled, message, cancellation)

    def _log_unless_cancelled(
        self,
        message: Message,
        cancellation: CancellationSignal | None,
    ) -> None:
        if cancellation is not None and cancellation.is_set():
            raise CancelledError("Logging was cancelled before it started")
        self.log(message)
