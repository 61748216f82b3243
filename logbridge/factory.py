# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import os
from typing import IO, Any, Mapping

from .configuration import (
    _default,
    configure_from_dict,
    configure_from_file,
    configure_from_stream,
    configure_from_uri,
)
from .logger import Logger
from .silent_logger import SilentLogger
from .stdlib_adapter import StdlibLoggerAdapter
from .style import get_engine_logger


def get_logger(target: str | type | None = None, style: str | None = None) -> StdlibLoggerAdapter:
    """Wrap a named engine logger, using the engine configuration as it stands.

    Args:
        target: Logger name, or a type whose module and qualified name is
            used. Defaults to LOG_NAME env or "logbridge".
        style: "{" or "%" argument style. Defaults to LOG_STYLE env or "{".

    Returns:
        StdlibLoggerAdapter around the engine logger

    Example:
        >>> logger = get_logger("orders")
        >>> logger.logger.logger.name
        'orders'
    """
    if target is None:
        target = _default(None, "LOG_NAME", "logbridge")
    style = _default(style, "LOG_STYLE", "{")
    return StdlibLoggerAdapter(get_engine_logger(target, style=style))


def create_logger(
    logger_type: str | None = None,
    name: str | type | None = None,
    style: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: Type of logger to create. Options: "stdlib", "silent".
            Defaults to LOG_TYPE env or "stdlib".
        name: Logger name or type. Defaults to LOG_NAME env or "logbridge".
        style: Argument style for "stdlib" loggers ("{" or "%")

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger(logger_type="stdlib", name="my-service")
        >>>
        >>> # Create silent logger for testing
        >>> logger = create_logger(logger_type="silent")
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdlib").lower()

    if logger_type == "stdlib":
        return get_logger(name, style=style)
    elif logger_type == "silent":
        silent_name = name if isinstance(name, str) else None
        return SilentLogger(name=silent_name or os.getenv("LOG_NAME"))
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: stdlib, silent"
        )


def create_logger_from_file(
    target: str | type,
    path: str | os.PathLike[str],
    watch: bool = True,
    poll_interval_seconds: float | None = None,
) -> StdlibLoggerAdapter:
    """Configure the engine from a file, then wrap the logger for target.

    Args:
        target: Logger name or type
        path: Configuration file (JSON, YAML or INI)
        watch: Re-apply the file whenever it changes
        poll_interval_seconds: Watch polling interval

    Returns:
        StdlibLoggerAdapter around the configured engine logger
    """
    configure_from_file(path, watch=watch, poll_interval_seconds=poll_interval_seconds)
    return get_logger(target)


def create_logger_from_stream(target: str | type, stream: IO[bytes] | IO[str]) -> StdlibLoggerAdapter:
    """Configure the engine from a stream, then wrap the logger for target."""
    configure_from_stream(stream)
    return get_logger(target)


def create_logger_from_uri(target: str | type, uri: str) -> StdlibLoggerAdapter:
    """Configure the engine from a URI, then wrap the logger for target."""
    configure_from_uri(uri)
    return get_logger(target)


def create_logger_from_dict(target: str | type, config: Mapping[str, Any]) -> StdlibLoggerAdapter:
    """Configure the engine from a mapping, then wrap the logger for target."""
    configure_from_dict(config)
    return get_logger(target)
