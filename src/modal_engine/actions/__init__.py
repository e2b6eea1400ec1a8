"""Ex-style line commands run from command-line mode."""

from .command import LINE_COMMANDS, run_line_command

__all__ = ["LINE_COMMANDS", "run_line_command"]
