"""Top-level keystroke grammar turning a pending string into a :class:`Command`."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from modal_engine.runtime import telemetry

from .errors import CommandError, IncompleteCommand, InvalidCommand
from .models import (
    DEFAULT_REGISTER,
    Change,
    ChangeMode,
    Char,
    Command,
    Delete,
    Direction,
    Edit,
    EndOfLine,
    Indent,
    Line,
    ModeTag,
    Motion,
    Move,
    MoveAndEnterMode,
    NewLineAndEnterMode,
    Operator,
    Put,
    Repeat,
    ReplaceChar,
    StartOfLine,
    Undo,
    Yank,
)
from .motion_parser import parse_motion
from .scanner import KeyStream, take_count

OPERATORS: Dict[str, Operator] = {
    ".": Repeat(),
    "u": Undo(),
    "d": Delete(),
    "c": Change(),
    "y": Yank(),
    "p": Put(),
    "<": Indent(Direction.BACKWARD),
    ">": Indent(Direction.FORWARD),
}


def _single(motion: Motion, op: Operator) -> Edit:
    return Edit(op=op, op_count=1, mo=motion, target_register=DEFAULT_REGISTER)


# Single-key commands that never reach the count/operator path.
MODE_SHORTCUTS: Dict[str, Callable[[], Command]] = {
    "i": lambda: ChangeMode(ModeTag.INSERT),
    "I": lambda: _single(Motion(1, StartOfLine()), MoveAndEnterMode(ModeTag.INSERT)),
    "a": lambda: _single(
        Motion(1, Char(Direction.FORWARD)), MoveAndEnterMode(ModeTag.INSERT)
    ),
    "A": lambda: _single(Motion(1, EndOfLine()), MoveAndEnterMode(ModeTag.INSERT)),
    "o": lambda: _single(
        Motion(1, Line(Direction.FORWARD)),
        NewLineAndEnterMode(Direction.FORWARD, ModeTag.INSERT),
    ),
    "O": lambda: _single(
        Motion(1, Line(Direction.BACKWARD)),
        NewLineAndEnterMode(Direction.BACKWARD, ModeTag.INSERT),
    ),
    "v": lambda: ChangeMode(ModeTag.VISUAL),
    ":": lambda: ChangeMode(ModeTag.COMMAND),
}


def _parse(raw: str) -> Command:
    stream = KeyStream(raw)
    first = stream.peek()
    if first is None:
        raise InvalidCommand(raw, reason="empty command")

    if first in MODE_SHORTCUTS:
        return MODE_SHORTCUTS[first]()

    target_register: Optional[str] = None
    if first == "r":
        stream.next()
        replacement = stream.next()
        if replacement is None:
            raise IncompleteCommand(raw)
        # Zero-length motion: the replaced character is the one under the cursor.
        return _single(Motion(0, Char(Direction.FORWARD)), ReplaceChar(replacement))
    if first == '"':
        stream.next()
        target_register = stream.next()
        if target_register is None:
            raise IncompleteCommand(raw)

    register = target_register or DEFAULT_REGISTER
    op_count = take_count(stream)
    opchar = stream.peek()

    if opchar == "x":
        return Edit(
            op=Delete(),
            op_count=1 if op_count is None else op_count,
            mo=Motion(1, Char(Direction.FORWARD)),
            target_register=register,
        )

    if opchar in OPERATORS:
        stream.next()
        motion = parse_motion(stream, opchar, raw)
        return Edit(
            op=OPERATORS[opchar],
            op_count=1 if op_count is None else op_count,
            mo=motion,
            target_register=register,
        )

    motion = parse_motion(stream, None, raw)
    if op_count is not None:
        motion = motion.repeated(op_count)
    return Move(motion)


def parse_command(pending: str) -> Command:
    """Parse the whole pending keystroke string.

    Raises :class:`IncompleteCommand` while ``pending`` is a valid prefix,
    :class:`UnknownCommand` when no rule matches and :class:`InvalidCommand`
    for input that can never become valid.
    """

    error: Optional[CommandError] = None
    with telemetry.span(
        "command::parse",
        logger_name="modal_engine.command",
        component="command",
        metadata={"keys": pending},
    ) as handle:
        try:
            command = _parse(pending)
        except IncompleteCommand as exc:
            handle.add_metadata("status", "pending")
            error = exc
        except CommandError as exc:
            handle.add_metadata("status", "error")
            error = exc
        else:
            handle.add_metadata("status", "match")
            handle.add_metadata("command", type(command).__name__)

    if error is not None:
        if error.clears_pending:
            telemetry.record_event(
                "command.error",
                level="warning",
                data={"keys": pending, "error": type(error).__name__},
                logger_name="modal_engine.command",
            )
        raise error
    return command


__all__ = ["parse_command", "OPERATORS", "MODE_SHORTCUTS"]
