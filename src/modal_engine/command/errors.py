"""Errors raised while parsing and resolving keystroke commands."""

from __future__ import annotations

from typing import Any


class CommandError(RuntimeError):
    """Base class for grammar errors; ``raw`` is the offending keystroke string."""

    clears_pending = True

    def __init__(self, message: str, *, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class IncompleteCommand(CommandError):
    """Valid prefix; the caller keeps the pending keystrokes and waits."""

    clears_pending = False

    def __init__(self, raw: str = "") -> None:
        super().__init__("incomplete command", raw=raw)


class UnknownCommand(CommandError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"unknown command: {raw!r}", raw=raw)


class InvalidCommand(CommandError):
    def __init__(self, raw: str, *, reason: str = "invalid command") -> None:
        super().__init__(f"{reason}: {raw!r}", raw=raw)
        self.reason = reason


class MotionError(RuntimeError):
    """Raised when a parsed motion cannot be resolved against a buffer."""


class UnsupportedMotion(MotionError):
    """The text object (or modifier) is parsed but has no resolution rule yet."""

    def __init__(self, subject: Any) -> None:
        name = getattr(subject, "name", None) or type(subject).__name__
        super().__init__(f"motion not yet supported: {name}")
        self.subject = subject


__all__ = [
    "CommandError",
    "IncompleteCommand",
    "UnknownCommand",
    "InvalidCommand",
    "MotionError",
    "UnsupportedMotion",
]
