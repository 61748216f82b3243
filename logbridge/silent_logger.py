# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Silent logger implementation for testing."""

import threading

from .logger import Logger
from .message import Message, render_message
from .severity import MessageSeverity


class SilentLogger(Logger):
    """Logger that stores messages in memory without output.

    Useful for testing code that logs without cluttering test output.
    Every message is kept as received, including those with an unmapped
    severity.
    """

    def __init__(self, name: str | None = None):
        """Initialize silent logger.

        Args:
            name: Optional logger name for identification
        """
        self.name = name or "logbridge"
        self.messages: list[Message] = []
        self._lock = threading.Lock()

    def log(self, message: Message) -> None:
        """Store a message.

        Args:
            message: The message to log
        """
        with self._lock:
            self.messages.append(message)

    def clear(self) -> None:
        """Clear all stored messages."""
        with self._lock:
            self.messages.clear()

    def get_messages(self, severity: MessageSeverity | int | None = None) -> list[Message]:
        """Get stored messages, optionally filtered by severity.

        Args:
            severity: Optional severity to filter by

        Returns:
            List of messages in the order they were logged
        """
        with self._lock:
            if severity is None:
                return list(self.messages)
            return [m for m in self.messages if m.severity == severity]

    def has_message(self, text: str, severity: MessageSeverity | int | None = None) -> bool:
        """Check if a message containing text was logged.

        Args:
            text: Substring to look for in the rendered message
            severity: Optional severity to filter by

        Returns:
            True if a matching message is found, False otherwise
        """
        return any(text in render_message(m) for m in self.get_messages(severity))
