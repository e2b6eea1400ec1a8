"""Runtime services: settings and telemetry."""

from .settings import EngineSettings

__all__ = ["EngineSettings"]
