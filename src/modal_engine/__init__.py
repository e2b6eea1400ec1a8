"""UI-agnostic modal keystroke interpreter."""

__version__ = "0.1.0"

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "command",
    "modes",
    "runtime",
]
