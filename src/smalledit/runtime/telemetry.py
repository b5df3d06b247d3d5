"""Logging for smalledit, built on telelog.

Everything in the editor logs through this module:

``configure(...)`` -- (re)build the telelog configuration
``get_logger(name)`` -- fetch a cached, configured logger
``record_event(name, ...)`` -- structured ``event::<name>`` records
``span(name, ...)`` -- profile a block and track it as a component

Console output stays off unless ``SMALLEDIT_LOG_CONSOLE`` is set, since
anything written to the terminal lands on top of the running TUI.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SMALLEDIT_"
DEFAULT_LOGGER_NAME = "smalledit"
DEFAULT_BUFFER_SIZE = 2048

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = _env_flag("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))

    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED"):
        try:
            size = int(_env("LOG_BUFFER_SIZE") or DEFAULT_BUFFER_SIZE)
        except ValueError:
            size = DEFAULT_BUFFER_SIZE
        config.with_buffering(True)
        config.with_buffer_size(size)

    config.with_profiling(_env_flag("PROFILE"))
    return config


def configure(config: Optional[Any] = None) -> None:
    """Adopt ``config`` (a ``telelog.Config``), or rebuild one from the environment.

    Loggers handed out before the call keep their old configuration.
    """

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config if config is not None else _config_from_env()
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            configure()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    """Return the logger method for ``level`` and whether it takes key/value pairs."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; collects metadata reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block with ``logger.profile`` and optionally track a component.

    ``component=True`` reuses ``name`` as the component id. ``metadata`` is
    added as logger context for the duration of the block. An exception
    escaping the block is logged through :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}

    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            handle = SpanHandle(log, name, component_name, dict(context))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


logger = get_logger()

__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
