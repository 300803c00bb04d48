"""
Playing a match in the terminal: input, driver and entry point.
"""
from .driver import MatchDriver, MatchResult, TickTimer, TICK
from .terminal_input import InputCommand, KeyReader, TerminalSetupError, decode_keys, raw_terminal

__all__ = [
    "MatchDriver",
    "MatchResult",
    "TickTimer",
    "TICK",
    "InputCommand",
    "KeyReader",
    "TerminalSetupError",
    "decode_keys",
    "raw_terminal",
]
