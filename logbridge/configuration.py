# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Explicit configuration of the logging engine.

Configuration is a process-wide step performed by the hosting application,
separate from creating loggers. Sources:

- an in-memory mapping (logging.config.dictConfig schema)
- a file: JSON, YAML or INI (logging.config.fileConfig schema), optionally
  watched and re-applied when it changes
- a byte or text stream
- a URI: file://, http:// or https://

Example:
    >>> from logbridge import configure_from_file, get_logger, LogMessage
    >>> configure_from_file("logging.yaml", watch=True)
    >>> get_logger("my-service").log(LogMessage.info("Service started"))
"""

import configparser
import json
import logging
import logging.config
import os
import threading
from pathlib import Path, PurePosixPath
from typing import IO, Any, Callable, Mapping
from urllib.parse import urlsplit
from urllib.request import url2pathname

import requests
import yaml

from .exceptions import ConfigurationError
from .formatters import create_default_log_config

logger = logging.getLogger(__name__)

JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
INI_FORMAT = "ini"

_FORMATS = (JSON_FORMAT, YAML_FORMAT, INI_FORMAT)

_EXTENSION_FORMATS = {
    ".json": JSON_FORMAT,
    ".yaml": YAML_FORMAT,
    ".yml": YAML_FORMAT,
    ".ini": INI_FORMAT,
    ".cfg": INI_FORMAT,
    ".conf": INI_FORMAT,
}

_CONTENT_TYPE_FORMATS = {
    "application/json": JSON_FORMAT,
    "application/yaml": YAML_FORMAT,
    "application/x-yaml": YAML_FORMAT,
    "text/yaml": YAML_FORMAT,
    "text/x-yaml": YAML_FORMAT,
}

DEFAULT_POLL_INTERVAL_SECONDS = 5.0
DEFAULT_URI_TIMEOUT_SECONDS = 10.0

_watchers: dict[str, "ConfigFileWatcher"] = {}
_watchers_lock = threading.Lock()


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def _positive_float(value: float | None, env_var: str, fallback: float) -> float:
    """Pick an explicit number, then env var, then fallback; must be positive."""
    if value is None:
        raw = os.getenv(env_var)
        if not raw:
            return fallback
        try:
            value = float(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_var}: {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{env_var} must be positive, got {value}")
    return float(value)


def _format_for_path(path: PurePosixPath | Path) -> str | None:
    return _EXTENSION_FORMATS.get(path.suffix.lower())


def _format_for_content_type(content_type: str | None) -> str | None:
    if not content_type:
        return None
    media_type = content_type.split(";", 1)[0].strip().lower()
    return _CONTENT_TYPE_FORMATS.get(media_type)


def detect_config_format(text: str, hint: str | None = None) -> str:
    """Decide how configuration text should be parsed.

    Args:
        text: Configuration text
        hint: Explicit format ("json", "yaml" or "ini"), used when given

    Returns:
        One of "json", "yaml", "ini"

    Raises:
        ConfigurationError: If hint is not a known format
    """
    if hint:
        config_format = hint.lower()
        if config_format not in _FORMATS:
            raise ConfigurationError(
                f"Unknown configuration format: {hint}. Must be one of: {', '.join(_FORMATS)}"
            )
        return config_format

    stripped = text.lstrip("\ufeff \t\r\n")
    if stripped.startswith("{"):
        return JSON_FORMAT
    if stripped.startswith("["):
        return INI_FORMAT
    return YAML_FORMAT


def _load_document(text: str, config_format: str, sniffed: bool) -> Any:
    if config_format != JSON_FORMAT:
        return yaml.safe_load(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        if not sniffed:
            raise
        # a leading "{" may also open a YAML flow mapping
        logger.debug("Configuration is not JSON, parsing it as YAML")
        return yaml.safe_load(text)


def _apply_text(text: str, hint: str | None, source: str) -> None:
    """Parse configuration text and apply it to the engine.

    Args:
        text: Configuration text, optionally starting with a byte order mark
        hint: Explicit format, or None to detect it from the content
        source: Where the text came from, for messages
    """
    text = text.removeprefix("\ufeff")
    config_format = detect_config_format(text, hint)
    if config_format == INI_FORMAT:
        parser = configparser.ConfigParser()
        parser.read_string(text, source=source)
        logging.config.fileConfig(parser, disable_existing_loggers=False)
    else:
        document = _load_document(text, config_format, sniffed=not hint)
        if not isinstance(document, Mapping):
            raise ConfigurationError(
                f"Logging configuration from {source} must be a mapping, "
                f"got {type(document).__name__}"
            )
        configure_from_dict(document)
    logger.debug("Applied %s logging configuration from %s", config_format, source)


def _apply_file(path: Path, config_format: str | None = None) -> None:
    text = path.read_text(encoding="utf-8-sig")
    _apply_text(text, config_format or _format_for_path(path), source=str(path))


def configure_from_dict(config: Mapping[str, Any]) -> None:
    """Apply an in-memory configuration (logging.config.dictConfig schema).

    "version" defaults to 1 and "disable_existing_loggers" to False, so
    loggers obtained before configuration keep working.

    Args:
        config: Configuration mapping
    """
    settings = dict(config)
    settings.setdefault("version", 1)
    settings.setdefault("disable_existing_loggers", False)
    logging.config.dictConfig(settings)


def configure_from_file(
    path: str | os.PathLike[str],
    watch: bool = True,
    poll_interval_seconds: float | None = None,
    config_format: str | None = None,
) -> "ConfigFileWatcher | None":
    """Apply configuration from a file.

    The format comes from config_format, then the file extension (.json,
    .yaml/.yml, .ini/.cfg/.conf), then the file content. A watcher left
    running for the same file by an earlier call is stopped.

    Args:
        path: Configuration file
        watch: Re-apply the file whenever it changes
        poll_interval_seconds: Watch polling interval. Defaults to
            LOG_CONFIG_POLL_INTERVAL env or 5 seconds.
        config_format: Explicit format ("json", "yaml" or "ini")

    Returns:
        The running ConfigFileWatcher when watch is True, otherwise None

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the content is not a usable configuration
    """
    config_path = Path(path)

    # the watcher takes its baseline before the file is read
    watcher = None
    if watch:
        watcher = ConfigFileWatcher(
            config_path,
            on_change=lambda changed: _apply_file(changed, config_format),
            poll_interval_seconds=poll_interval_seconds,
        )
    _apply_file(config_path, config_format)
    _replace_watcher(config_path, watcher)
    if watcher is not None:
        watcher.start()
    return watcher


def configure_from_stream(stream: IO[bytes] | IO[str], config_format: str | None = None) -> None:
    """Apply configuration read from a stream.

    Byte streams are decoded as UTF-8. The stream is read to the end but
    not closed.

    Args:
        stream: Open byte or text stream
        config_format: Explicit format; detected from the content if omitted
    """
    data = stream.read()
    text = data.decode("utf-8-sig") if isinstance(data, bytes) else data
    source = str(getattr(stream, "name", "<stream>"))
    _apply_text(text, config_format, source=source)


def configure_from_uri(
    uri: str,
    timeout_seconds: float | None = None,
    config_format: str | None = None,
) -> None:
    """Apply configuration from a file://, http:// or https:// URI.

    Args:
        uri: Configuration location
        timeout_seconds: HTTP timeout. Defaults to LOG_CONFIG_TIMEOUT env or 10 seconds.
        config_format: Explicit format; otherwise taken from the URI path
            extension, the Content-Type header, then the content

    Raises:
        ConfigurationError: If the scheme is not supported
        requests.RequestException: If the HTTP fetch fails
    """
    parts = urlsplit(uri)
    scheme = parts.scheme.lower()

    if scheme == "file":
        configure_from_file(url2pathname(parts.path), watch=False, config_format=config_format)
        return

    if scheme not in ("http", "https"):
        raise ConfigurationError(
            f"Unsupported configuration URI scheme: {parts.scheme!r}. "
            f"Must be one of: file, http, https"
        )

    timeout = _positive_float(timeout_seconds, "LOG_CONFIG_TIMEOUT", DEFAULT_URI_TIMEOUT_SECONDS)
    response = requests.get(uri, timeout=timeout)
    response.raise_for_status()

    text = response.text
    hint = (
        config_format
        or _format_for_path(PurePosixPath(parts.path))
        or _format_for_content_type(response.headers.get("Content-Type"))
    )
    _apply_text(text, hint, source=uri)


def configure_default(level: str | None = None, logger_name: str | None = None) -> None:
    """Apply the default configuration: JSON records on stdout.

    Args:
        level: Root level. Defaults to LOG_LEVEL env or "INFO".
        logger_name: Optional fixed value for the JSON logger field
    """
    level = _default(level, "LOG_LEVEL", "INFO").upper()
    configure_from_dict(create_default_log_config(level=level, logger_name=logger_name))


class ConfigFileWatcher:
    """Watch a configuration file and call back when it changes.

    Polls the file's modification time and size from a daemon thread.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        on_change: Callable[[Path], None],
        poll_interval_seconds: float | None = None,
    ):
        """Initialize config file watcher.

        Args:
            path: File to watch
            on_change: Called with the path after each detected change
            poll_interval_seconds: Polling interval. Defaults to
                LOG_CONFIG_POLL_INTERVAL env or 5 seconds.
        """
        self.path = Path(path)
        self.on_change = on_change
        self.poll_interval_seconds = _positive_float(
            poll_interval_seconds, "LOG_CONFIG_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SECONDS
        )
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False
        self._last_signature = self._signature()

    def _signature(self) -> tuple[int, int] | None:
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def check_for_changes(self) -> bool:
        """Call on_change if the file changed since the last check.

        A missing file counts as unchanged. Errors raised by on_change are
        logged and do not stop the watcher.

        Returns:
            True if a change was detected
        """
        signature = self._signature()
        if signature is None or signature == self._last_signature:
            return False

        self._last_signature = signature
        logger.info("Logging configuration file %s changed, reloading", self.path)
        try:
            self.on_change(self.path)
        except Exception:
            logger.exception("Failed to reload logging configuration from %s", self.path)
        return True

    def start(self) -> None:
        """Start watching in a background thread."""
        if self._running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop,
            name=f"logbridge-watch-{self.path.name}",
            daemon=True,
        )
        self._thread.start()
        self._running = True
        logger.debug("Watching logging configuration file %s", self.path)

    def stop(self) -> None:
        """Stop watching."""
        if not self._running:
            return

        self._stop_event.set()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=10)
        self._running = False
        logger.debug("Stopped watching logging configuration file %s", self.path)

    def is_running(self) -> bool:
        """Check if the watcher is running."""
        return self._running

    def _run_loop(self) -> None:
        while not self._stop_event.wait(self.poll_interval_seconds):
            self.check_for_changes()


def _replace_watcher(path: Path, watcher: ConfigFileWatcher | None) -> None:
    """Register watcher for path, stopping any watcher already registered."""
    key = str(path.resolve())
    with _watchers_lock:
        previous = _watchers.pop(key, None)
        if watcher is not None:
            _watchers[key] = watcher
    if previous is not None:
        previous.stop()


def active_watchers() -> list[ConfigFileWatcher]:
    """Return the watchers started by configure_from_file."""
    with _watchers_lock:
        return list(_watchers.values())


def stop_watching() -> None:
    """Stop every watcher started by configure_from_file."""
    with _watchers_lock:
        watchers = list(_watchers.values())
        _watchers.clear()
    for watcher in watchers:
        watcher.stop()
