# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Named engine logger acquisition with brace-style formatting."""

import logging
from typing import Any, Mapping

from .exceptions import ConfigurationError

BRACE_STYLE = "{"
PERCENT_STYLE = "%"


class _BraceMessage:
    """Record message rendered with str.format only when a handler asks for it."""

    def __init__(self, fmt: str, args: tuple[Any, ...]):
        self.fmt = fmt
        self.args = args

    def __str__(self) -> str:
        return self.fmt.format(*self.args)


class BraceStyleLogger(logging.LoggerAdapter):
    """LoggerAdapter whose positional arguments fill {}-style fields.

    logger.warning("retrying {0} of {1}", 1, 3) produces the record message
    "retrying 1 of 3". Keyword arguments (exc_info, extra, stack_info,
    stacklevel) keep their stdlib meaning.
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        if self.extra:
            kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level):
            msg, kwargs = self.process(msg, kwargs)
            # skip this frame so caller info points at the code that logged
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
            self.logger.log(level, _BraceMessage(msg, args), **kwargs)


def logger_name_for(target: str | type) -> str:
    """Return the engine logger name for a name or a type.

    Types are named by their module and qualified name, so loggers for
    classes nest under their module's logger.
    """
    if isinstance(target, str):
        return target
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    raise TypeError(f"Logger target must be a name or a type, got {type(target).__name__}")


def get_engine_logger(target: str | type, style: str = BRACE_STYLE) -> logging.Logger | BraceStyleLogger:
    """Obtain a named engine logger.

    Args:
        target: Logger name, or a type whose module and qualified name is used
        style: "{" for str.format positional fields, "%" for printf-style
            arguments (the plain logging.Logger)

    Returns:
        An engine logger exposing debug/info/warning/error(format, *values)

    Raises:
        ConfigurationError: If style is not recognized
    """
    stdlib_logger = logging.getLogger(logger_name_for(target))
    if style == BRACE_STYLE:
        return BraceStyleLogger(stdlib_logger)
    if style == PERCENT_STYLE:
        return stdlib_logger
    raise ConfigurationError(
        f"Unknown logger style: {style!r}. Must be one of: {BRACE_STYLE}, {PERCENT_STYLE}"
    )
