"""telelog-backed logging for the modal engine.

``configure(...)`` picks the active telelog configuration (explicit config,
named preset, or :class:`EngineSettings` read from the environment).
``get_logger(name)`` hands out cached loggers, ``record_event`` writes a
structured event and ``span`` wraps a block in a profile + component scope.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import EngineSettings

tl = cast(Any, telelog)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_SETTINGS: EngineSettings = EngineSettings()


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _development(config: Any, settings: EngineSettings) -> None:
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(settings.colored)
    config.with_json_format(False)


def _production(config: Any, settings: EngineSettings) -> None:
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(settings.log_file or "modal_engine.log")
    config.with_buffering(True)


def _performance(config: Any, settings: EngineSettings) -> None:
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_buffering(True)
    config.with_json_format(True)
    config.with_file_output(settings.log_file or "modal_engine-performance.log")


_PRESETS: Dict[str, Callable[[Any, EngineSettings], None]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
    "performance_analysis": _performance,
}


def build_config(
    settings: EngineSettings, *, preset: Optional[str] = None
) -> Any:
    """Translate settings (or a named preset) into a ``telelog.Config``."""

    config = tl.Config()
    name = (preset or settings.log_preset or "").lower()
    if name:
        apply = _PRESETS.get(name)
        if apply is None:
            raise ValueError(f"Unknown preset '{preset or settings.log_preset}'.")
        apply(config, settings)
    else:
        config.with_min_level(settings.log_level)
        config.with_console_output(settings.console)
        if settings.console:
            config.with_colored_output(settings.colored)
        if settings.log_json:
            config.with_json_format(True)
        if settings.log_file:
            config.with_file_output(settings.log_file)
        if settings.log_buffered:
            config.with_buffering(True)
            config.with_buffer_size(settings.log_buffer_size)

    # Span timings rely on profiling being on for every config.
    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[EngineSettings] = None,
) -> None:
    """Swap the active telelog configuration and drop cached loggers."""

    global _ACTIVE_CONFIG, _SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if settings is not None:
        _SETTINGS = settings
    if config is None:
        config = build_config(_SETTINGS, preset=preset)
    else:
        config.with_profiling(True)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active config."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config(_SETTINGS)
    logger_name = name or _SETTINGS.logger_name
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
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
    """Write ``event::<name>`` with ``data`` as structured fields."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; lets the block attach metadata or flag failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        for key, value in (extra or {}).items():
            payload[key] = _stringify(value)
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def cancel(self, reason: Optional[str] = None) -> None:
        extra = {"reason": reason} if reason else None
        _emit(self.logger, "warning", "span::cancel", self._payload(extra))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component=True`` tracks the block as a component of the same name, a
    string picks the component name. ``metadata`` is pushed as logger context
    for the duration of the block.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc) or type(exc).__name__)
            raise
        finally:
            for key in context:
                log.remove_context(key)


configure(settings=EngineSettings.from_env())
logger = get_logger()

__all__ = [
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
