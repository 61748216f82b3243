# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity-tagged log message types."""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from .severity import MessageSeverity


@runtime_checkable
class Message(Protocol):
    """Shape of a message accepted by a Logger.

    Attributes:
        severity: A MessageSeverity member, or any other value (unmapped)
        format: A str.format template using positional fields, e.g. "retrying {0} of {1}"
        values: Positional substitution arguments for the template
    """

    @property
    def severity(self) -> MessageSeverity | int: ...

    @property
    def format(self) -> str: ...

    @property
    def values(self) -> Sequence[Any]: ...


@dataclass(frozen=True)
class LogMessage:
    """Immutable Message implementation."""

    severity: MessageSeverity | int
    format: str
    values: Sequence[Any] = ()

    @classmethod
    def debug(cls, format: str, *values: Any) -> "LogMessage":
        return cls(MessageSeverity.DEBUG, format, values)

    @classmethod
    def info(cls, format: str, *values: Any) -> "LogMessage":
        return cls(MessageSeverity.INFORMATIONAL, format, values)

    @classmethod
    def warning(cls, format: str, *values: Any) -> "LogMessage":
        return cls(MessageSeverity.WARNING, format, values)

    @classmethod
    def error(cls, format: str, *values: Any) -> "LogMessage":
        return cls(MessageSeverity.ERROR, format, values)


def render_message(message: Message) -> str:
    """Substitute a message's values into its format template.

    Args:
        message: Message to render

    Returns:
        The rendered text

    Raises:
        IndexError: If the template references more values than supplied
        KeyError: If the template uses named fields
    """
    return message.format.format(*message.values)
