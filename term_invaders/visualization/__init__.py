from .terminal_display import TerminalGameDisplay

__all__ = [
    "TerminalGameDisplay",
]
