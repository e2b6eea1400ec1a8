"""Keystroke grammar, motion resolution and command execution."""

from .models import (
    DEFAULT_REGISTER,
    BigWord,
    Change,
    ChangeMode,
    Char,
    Command,
    Delete,
    Direction,
    Edit,
    EndOfBigWord,
    EndOfLine,
    EndOfWord,
    Indent,
    Line,
    ModeTag,
    Motion,
    Move,
    MoveAndEnterMode,
    NewLineAndEnterMode,
    NextChar,
    Operator,
    Paragraph,
    Put,
    Repeat,
    RepeatNextChar,
    ReplaceChar,
    StartOfLine,
    TextObject,
    TextObjectMod,
    Undo,
    WholeLine,
    Word,
    Yank,
)
from .classify import CharClass, classify
from .errors import (
    CommandError,
    IncompleteCommand,
    InvalidCommand,
    MotionError,
    UnknownCommand,
    UnsupportedMotion,
)
from .scanner import KeyStream, take_count
from .motion_parser import parse_motion
from .parser import parse_command
from .resolver import TextCursor, TextRange, resolve
from .executor import EditPlan, execute, plan_edit

__all__ = [
    "DEFAULT_REGISTER",
    "Direction",
    "ModeTag",
    "Char",
    "Word",
    "BigWord",
    "EndOfWord",
    "EndOfBigWord",
    "NextChar",
    "RepeatNextChar",
    "WholeLine",
    "Line",
    "StartOfLine",
    "EndOfLine",
    "Paragraph",
    "TextObject",
    "TextObjectMod",
    "Motion",
    "Repeat",
    "Undo",
    "Delete",
    "Change",
    "Yank",
    "Put",
    "Indent",
    "MoveAndEnterMode",
    "NewLineAndEnterMode",
    "ReplaceChar",
    "Operator",
    "Move",
    "Edit",
    "ChangeMode",
    "Command",
    "CharClass",
    "classify",
    "CommandError",
    "IncompleteCommand",
    "InvalidCommand",
    "UnknownCommand",
    "MotionError",
    "UnsupportedMotion",
    "KeyStream",
    "take_count",
    "parse_motion",
    "parse_command",
    "TextCursor",
    "TextRange",
    "resolve",
    "EditPlan",
    "execute",
    "plan_edit",
]
