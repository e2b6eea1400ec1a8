"""Actions that evaluate Ex-style command lines."""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

from modal_engine.command import InvalidCommand, UnknownCommand
from modal_engine.modes.base_mode import ModeResult
from modal_engine.modes.editor_state import EditorState, UserMessage
from modal_engine.runtime import telemetry

CommandHandler = Callable[[EditorState, re.Match[str]], ModeResult]


def run_line_command(editor: EditorState, raw: str) -> ModeResult:
    """Match ``raw`` against the command table and run the first hit."""

    text = raw.strip()
    if not text:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")
    for pattern, handler in LINE_COMMANDS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        with telemetry.span(
            "command::line",
            logger_name="modal_engine.actions",
            metadata={"line": text, "command": handler.__name__},
        ):
            return handler(editor, match)
    editor.bus.emit("command.error", text)
    raise UnknownCommand(text)


def _done(status: str, message: str) -> ModeResult:
    return ModeResult(consumed=True, switch_to="normal", status=status, message=message)


def _forced(match: re.Match[str]) -> bool:
    return bool(match.group("force"))


def _args(match: re.Match[str]) -> List[str]:
    return (match.group("args") or "").split()


def _handle_echo(editor: EditorState, match: re.Match[str]) -> ModeResult:
    message = match.group("text") or ""
    editor.bus.emit("command.echo", message)
    return _done("command_echo", message)


def _handle_write(editor: EditorState, match: re.Match[str]) -> ModeResult:
    force = _forced(match)
    _emit_write(editor, _args(match), force=force)
    return _done(
        "command_write_force" if force else "command_write",
        "write!" if force else "write",
    )


def _handle_quit(editor: EditorState, match: re.Match[str]) -> ModeResult:
    force = _forced(match)
    _emit_quit(editor, force=force)
    return _done(
        "command_quit_force" if force else "command_quit",
        "quit!" if force else "quit",
    )


def _handle_wq(editor: EditorState, match: re.Match[str]) -> ModeResult:
    force = _forced(match)
    _emit_write(editor, _args(match), force=force)
    _emit_quit(editor, force=force)
    return _done(
        "command_wq_force" if force else "command_wq",
        "wq!" if force else "wq",
    )


def _handle_x(editor: EditorState, match: re.Match[str]) -> ModeResult:
    force = _forced(match)
    _emit_write(editor, _args(match), force=force)
    _emit_quit(editor, force=force)
    return _done(
        "command_x_force" if force else "command_x",
        "x!" if force else "x",
    )


def _handle_edit(editor: EditorState, match: re.Match[str]) -> ModeResult:
    force = _forced(match)
    path = (match.group("path") or "").strip()
    if not path:
        raise InvalidCommand(match.string, reason="missing path for editing a file")
    payload = {
        "force": force,
        "server": match.group("server") or "local",
        "path": path,
        "snapshot": editor.buffer.snapshot(),
    }
    editor.bus.emit("command.edit", payload)
    return _done(
        "command_edit_force" if force else "command_edit",
        "edit!" if force else "edit",
    )


def _handle_test(editor: EditorState, match: re.Match[str]) -> ModeResult:
    args = match.group("args") or ""

    def chosen(index: int, state: EditorState) -> None:
        state.bus.emit("message.action", {"index": index, "args": args})

    editor.process_usr_msg(
        UserMessage.info(
            "This is a test",
            (("option 1", "looong option 2", "option 3"), chosen),
        )
    )
    return _done("command_test", args)


def _emit_write(editor: EditorState, args: List[str], *, force: bool) -> None:
    payload = {
        "force": force,
        "args": list(args),
        "snapshot": editor.buffer.snapshot(),
    }
    editor.bus.emit("command.write", payload)


def _emit_quit(editor: EditorState, *, force: bool) -> None:
    editor.bus.emit("command.quit", {"force": force})


_ARGS = r"(?:\s+(?P<args>.*))?"

LINE_COMMANDS: Tuple[Tuple[re.Pattern[str], CommandHandler], ...] = (
    (re.compile(r"echo(?:\s+(?P<text>.*))?"), _handle_echo),
    (re.compile(r"w(?:rite)?(?P<force>!)?" + _ARGS), _handle_write),
    (re.compile(r"q(?:uit)?(?P<force>!)?"), _handle_quit),
    (re.compile(r"wq(?P<force>!)?" + _ARGS), _handle_wq),
    (re.compile(r"(?:x|exit)(?P<force>!)?" + _ARGS), _handle_x),
    (
        re.compile(
            r"e(?:dit)?(?P<force>!)?"
            r"(?:\s+(?:(?P<server>[^:\s]+):)?(?P<path>.*))?"
        ),
        _handle_edit,
    ),
    (re.compile(r"test(?:\s+(?P<args>.*))?"), _handle_test),
)


__all__ = ["CommandHandler", "LINE_COMMANDS", "run_line_command"]
