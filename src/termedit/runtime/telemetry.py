"""Structured logging for the editor, backed by telelog.

Components log through named loggers (``termedit.editor``,
``termedit.render``, ``termedit.keymaps``, ...); history and file spans use
the root ``termedit`` logger. A span times one operation such as a command,
an undo, a file save or a render pass, and tags it with the component doing
the work. An event is a single ``event::<name>`` line with key/value data.

The editor draws on the terminal itself, so nothing reaches the console
unless ``TERMEDIT_LOG_CONSOLE`` is set. Point ``TERMEDIT_LOG_FILE`` at a file
instead.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TERMEDIT_"
ROOT_LOGGER = "termedit"


@dataclass(frozen=True)
class LogPreset:
    """Named logging setup selectable with ``--log-preset``."""

    level: str
    log_file: Optional[str] = None
    buffered: bool = False


PRESETS: Dict[str, LogPreset] = {
    "development": LogPreset("DEBUG", log_file="termedit-debug.log"),
    "production": LogPreset("INFO", log_file="termedit.log", buffered=True),
    "testing": LogPreset("WARNING"),
}

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _flag(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _base_config(level: str) -> Any:
    config = tl.Config()
    config.with_min_level(level)
    config.with_console_output(False)
    # spans rely on logger.profile
    config.with_profiling(True)
    return config


def _preset_config(name: str) -> Any:
    try:
        preset = PRESETS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{name}'.") from None

    config = _base_config(preset.level)
    log_file = _setting("LOG_FILE") or preset.log_file
    if log_file:
        config.with_file_output(log_file)
    if preset.buffered:
        config.with_buffering(True)
    return config


def _env_config() -> Any:
    config = _base_config((_setting("LOG_LEVEL") or "INFO").upper())

    if _flag("LOG_CONSOLE"):
        config.with_console_output(True)
        config.with_colored_output(not _flag("NO_COLOR"))
    if _flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_setting("LOG_BUFFER_SIZE") or "2048"))
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active configuration and drop cached loggers.

    ``preset`` names one of :data:`PRESETS`; ``config`` is a ready
    ``telelog.Config``. With neither, the ``TERMEDIT_LOG_*`` variables decide.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()
    else:
        config.with_profiling(True)

    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Cached ``telelog.Logger`` for ``name`` (the root editor logger by default)."""

    global _config
    name = name or ROOT_LOGGER
    logger = _loggers.get(name)
    if logger is None:
        if _config is None:
            _config = _env_config()
        logger = _loggers[name] = tl.Logger.with_config(name, _config)
    return logger


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method_name = str(level).lower()
    structured = getattr(logger, f"{method_name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _as_text(value)) for key, value in payload.items()])
        return

    plain = getattr(logger, method_name, None)
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
    """Log ``event::<name>``, e.g. a scroll, a file error or quit."""

    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Metadata of a running span; logged with ``span::fail`` if it raises."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _as_text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile ``name`` while ``component`` is tracked.

    ``metadata`` (the command name, a file path, the viewport row) is pushed
    into the logger context for the span's duration, so every line logged
    inside carries it.
    """

    log = get_logger(logger_name)
    context = {key: _as_text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, component, dict(context))

    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "LogPreset",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
