# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared worker pool for asynchronous logging."""

import os
import threading
from concurrent.futures import ThreadPoolExecutor

from .exceptions import ConfigurationError

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _max_workers_from_env() -> int | None:
    """Read LOG_ASYNC_MAX_WORKERS, or None to use the pool default."""
    raw = os.getenv("LOG_ASYNC_MAX_WORKERS")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid LOG_ASYNC_MAX_WORKERS: {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"LOG_ASYNC_MAX_WORKERS must be positive, got {value}")
    return value


def get_executor(max_workers: int | None = None) -> ThreadPoolExecutor:
    """Return the process-wide logging pool, creating it on first use.

    Args:
        max_workers: Pool size used if the pool does not exist yet.
            Defaults to LOG_ASYNC_MAX_WORKERS env or the ThreadPoolExecutor default.

    Returns:
        The shared ThreadPoolExecutor
    """
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = max_workers if max_workers is not None else _max_workers_from_env()
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="logbridge")
        return _executor


def shutdown_executor(wait: bool = True) -> None:
    """Shut down the shared pool. A later get_executor() creates a new one."""
    global _executor
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
