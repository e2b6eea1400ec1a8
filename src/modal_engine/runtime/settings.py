"""Environment-driven settings shared by telemetry and the editor layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

ENV_PREFIX = "MODAL_ENGINE_"


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    return env.get(f"{ENV_PREFIX}{name}")


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(env, name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _number(
    env: Mapping[str, str],
    name: str,
    default: float,
    cast: Callable[[str], float] = float,
) -> float:
    raw = _lookup(env, name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be numeric, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Runtime knobs; every field maps to a ``MODAL_ENGINE_*`` variable."""

    logger_name: str = "modal_engine"
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    log_buffered: bool = False
    log_buffer_size: int = 2048
    console: bool = True
    colored: bool = True
    log_preset: Optional[str] = None
    message_ttl: float = 3.0

    def __post_init__(self) -> None:
        if self.message_ttl <= 0:
            raise ValueError("message_ttl must be positive")
        if self.log_buffer_size <= 0:
            raise ValueError("log_buffer_size must be positive")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        source = os.environ if env is None else env
        defaults = cls()
        preset = _lookup(source, "LOG_PRESET")
        return cls(
            logger_name=_lookup(source, "LOGGER") or defaults.logger_name,
            log_level=(_lookup(source, "LOG_LEVEL") or defaults.log_level).upper(),
            log_file=_lookup(source, "LOG_FILE") or defaults.log_file,
            log_json=_flag(source, "LOG_JSON", defaults.log_json),
            log_buffered=_flag(source, "LOG_BUFFERED", defaults.log_buffered),
            log_buffer_size=int(
                _number(source, "LOG_BUFFER_SIZE", defaults.log_buffer_size, int)
            ),
            console=not _flag(source, "DISABLE_CONSOLE", False),
            colored=not _flag(source, "NO_COLOR", False),
            log_preset=preset.strip().lower() if preset else None,
            message_ttl=_number(source, "MESSAGE_TTL", defaults.message_ttl),
        )


__all__ = ["ENV_PREFIX", "EngineSettings"]
