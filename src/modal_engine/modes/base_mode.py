"""Key events, mode results and the event bus shared by every mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

ESCAPE_KEYS = frozenset({"ESC", "<Esc>", "ESCAPE"})
ENTER_KEYS = frozenset({"ENTER", "RETURN"})
BACKSPACE_KEYS = frozenset({"BACKSPACE", "BACK"})


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``text`` carries the typed character for printable keys; named keys
    (``ESC``, ``ENTER``, ``LEFT``...) leave it ``None``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def char(self) -> Optional[str]:
        """The typed character, if this is a single printable keystroke."""

        if self.modifiers and set(self.modifiers) - {"SHIFT"}:
            return None
        if self.text is None or len(self.text) != 1 or not self.text.isprintable():
            return None
        return self.text

    @property
    def is_escape(self) -> bool:
        return self.key in ESCAPE_KEYS

    @property
    def is_enter(self) -> bool:
        return self.key in ENTER_KEYS

    @property
    def is_backspace(self) -> bool:
        return self.key in BACKSPACE_KEYS


@dataclass(slots=True)
class ModeResult:
    """Outcome of handling one key."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, ())):
            callback(payload)


__all__ = [
    "KeyInput",
    "ModeResult",
    "ModeBus",
    "ESCAPE_KEYS",
    "ENTER_KEYS",
    "BACKSPACE_KEYS",
]
