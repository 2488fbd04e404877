"""Logging and profiling helpers built on telelog.

Everything in the editor core logs through this module:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- cached, configured logger lookup
``record_event(name, ...)`` -- structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component

Settings come from ``CODE_EDITOR_*`` environment variables: ``LOGGER``,
``LOG_LEVEL`` (default ``WARNING``), ``LOG_FILE``, ``LOG_JSON``,
``LOG_BUFFERED``/``LOG_BUFFER_SIZE``, ``DISABLE_CONSOLE`` and ``NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CODE_EDITOR_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "code_editor")

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True)
class LogSettings:
    """Plain description of a telelog configuration."""

    level: str = "WARNING"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # span timings are always wanted
        config.with_profiling(True)
        return config


PRESETS: Mapping[str, LogSettings] = MappingProxyType(
    {
        "development": LogSettings(level="DEBUG"),
        "production": LogSettings(
            level="INFO", console=False, log_file="code_editor.log", buffered=True
        ),
        "performance": LogSettings(
            level="DEBUG",
            console=False,
            json=True,
            log_file="code_editor-performance.log",
            buffered=True,
        ),
    }
)


def _env_flag(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> LogSettings:
    env = os.environ if environ is None else environ
    size = env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE", "").strip()
    return LogSettings(
        level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "").strip() or "WARNING",
        console=not _env_flag(env, "DISABLE_CONSOLE"),
        colored=not _env_flag(env, "NO_COLOR"),
        json=_env_flag(env, "LOG_JSON"),
        log_file=env.get(f"{ENV_PREFIX}LOG_FILE", "").strip(),
        buffered=_env_flag(env, "LOG_BUFFERED"),
        buffer_size=int(size) if size else 2048,
    )


def preset_settings(preset: str) -> LogSettings:
    key = preset.strip().lower()
    if key == "performance_analysis":
        key = "performance"
    settings = PRESETS.get(key)
    if settings is None:
        raise ValueError(f"Unknown telemetry preset '{preset}'.")
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file and settings.log_file:
        settings = replace(settings, log_file=log_file)
    return settings


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` adopts an explicit ``telelog.Config``; ``preset`` names one of
    :data:`PRESETS`. With neither, settings are re-read from the environment.
    Cached loggers are dropped so the next lookup picks up the change.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = preset_settings(preset).build()
    elif config is None:
        config = settings_from_env().build()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = settings_from_env().build()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Log with key/value pairs when the level has a ``*_with`` variant."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach metadata or flag failures."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def _logger_context(logger: Any, values: Dict[str, str]) -> Iterator[None]:
    for key, value in values.items():
        logger.add_context(key, value)
    try:
        yield
    finally:
        for key in values:
            logger.remove_context(key)


def _component_name(name: str, component: Optional[str | bool]) -> Optional[str]:
    if component is True:
        return name
    if isinstance(component, str):
        return component
    return None


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block under ``name``.

    ``component=True`` tracks the block as a component named ``name``; a string
    names the component explicitly. ``metadata`` is logger context for the
    duration of the block. An exception escaping the block is logged through
    :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = _component_name(name, component)
    values = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, component_name, dict(values))

    with ExitStack() as stack:
        stack.enter_context(_logger_context(log, values))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "preset_settings",
    "record_event",
    "settings_from_env",
    "span",
]
