"""The closed set of mode states; each variant carries its own transient data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True)
class NormalState:
    pending: str = ""
    name = "normal"


@dataclass(slots=True)
class InsertState:
    inserted: int = 0
    name = "insert"


@dataclass(slots=True)
class CommandState:
    text: str = ""
    cursor: int = 0
    name = "command"


@dataclass(slots=True)
class VisualState:
    anchor: int = 0
    pending: str = ""
    name = "visual"


@dataclass(slots=True)
class UserMessageState:
    selected: int = 0
    name = "user_message"


ModeState = Union[NormalState, InsertState, CommandState, VisualState, UserMessageState]

MODE_NAMES = (
    NormalState.name,
    InsertState.name,
    CommandState.name,
    VisualState.name,
    UserMessageState.name,
)

__all__ = [
    "NormalState",
    "InsertState",
    "CommandState",
    "VisualState",
    "UserMessageState",
    "ModeState",
    "MODE_NAMES",
]
