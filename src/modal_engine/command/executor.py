"""Applies parsed commands to a buffer and builds plans for edit operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from modal_engine.buffer.view import TextQuery
from modal_engine.runtime import telemetry

from .models import (
    ChangeMode,
    Command,
    Edit,
    ModeTag,
    Move,
    MoveAndEnterMode,
    NewLineAndEnterMode,
    Operator,
)
from .resolver import TextRange, resolve


@dataclass(frozen=True, slots=True)
class EditPlan:
    """What an operator should do; applying it is left to the caller.

    ``range`` is normalized (``start <= end``); ``reversed`` records whether
    the motion ran backwards.
    """

    operator: Operator
    range: TextRange
    reversed: bool
    register: str
    op_count: int
    motion_count: int


def plan_edit(command: Edit, view: TextQuery) -> EditPlan:
    motion = command.mo.repeated(command.op_count)
    raw = resolve(motion, view)
    return EditPlan(
        operator=command.op,
        range=raw.normalized(),
        reversed=raw.reversed,
        register=command.target_register,
        op_count=command.op_count,
        motion_count=command.mo.count,
    )


def execute(command: Command, buffer: TextQuery) -> Optional[ModeTag]:
    """Run ``command`` against ``buffer``.

    Only the cursor index is ever changed. Returns the mode to switch to, or
    ``None`` to stay in the current one.
    """

    with telemetry.span(
        "command::execute",
        logger_name="modal_engine.command",
        component="executor",
        metadata={"command": type(command).__name__},
    ):
        if isinstance(command, Move):
            buffer.cursor_index = resolve(command.motion, buffer).end
            return None
        if isinstance(command, ChangeMode):
            return command.mode
        if isinstance(command, Edit):
            return _execute_edit(command, buffer)
        raise TypeError(f"Unknown command {command!r}")


def _execute_edit(command: Edit, buffer: TextQuery) -> Optional[ModeTag]:
    op = command.op
    target = resolve(command.mo.repeated(command.op_count), buffer)
    if isinstance(op, MoveAndEnterMode):
        buffer.cursor_index = target.end
        return op.mode
    if isinstance(op, NewLineAndEnterMode):
        # Opening the line is a text mutation; the caller does it.
        return op.mode
    return None


__all__ = ["EditPlan", "execute", "plan_edit"]
