"""
Terminal input - raw mode, key decoding and a background key reader.
"""
import logging
import os
import queue
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

ESC = 0x1B
CTRL_C = 0x03


class InputCommand(Enum):
    """Abstract commands decoded from keystrokes."""
    LEFT = "left"
    RIGHT = "right"
    SHOOT = "shoot"
    QUIT = "quit"


class TerminalSetupError(RuntimeError):
    """The terminal could not be switched into raw mode."""


_KEYMAP = {
    ord("q"): InputCommand.QUIT,
    ord("Q"): InputCommand.QUIT,
    CTRL_C: InputCommand.QUIT,
    ord("a"): InputCommand.LEFT,
    ord("A"): InputCommand.LEFT,
    ord("d"): InputCommand.RIGHT,
    ord("D"): InputCommand.RIGHT,
    ord(" "): InputCommand.SHOOT,
}

_ARROWS = {
    ord("C"): InputCommand.RIGHT,
    ord("D"): InputCommand.LEFT,
}


def decode_keys(data: bytes) -> Optional[InputCommand]:
    """
    Decode one read from the terminal.

    Only the first key of a read counts; arrow keys arrive as the escape
    sequence ESC [ C / ESC [ D in a single read.

    Args:
        data: Bytes returned by one read

    Returns:
        The decoded command, or None for unmapped input
    """
    if not data:
        return None

    first = data[0]
    if first == ESC:
        if len(data) >= 3 and data[1] == ord("["):
            return _ARROWS.get(data[2])
        return None

    return _KEYMAP.get(first)


@contextmanager
def raw_terminal(fd: int) -> Iterator[None]:
    """
    Put the terminal on fd into raw mode for the duration of the block.

    Output post-processing stays on so newlines still return the carriage.

    Raises:
        TerminalSetupError: fd is not a terminal or termios is unavailable
    """
    try:
        import termios
        import tty
    except ImportError as e:
        raise TerminalSetupError(f"raw mode is not supported here: {e}") from e

    try:
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
        attrs = termios.tcgetattr(fd)
        attrs[1] |= termios.OPOST | termios.ONLCR
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (termios.error, OSError) as e:
        raise TerminalSetupError(f"failed to set raw mode: {e}") from e

    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


class KeyReader(threading.Thread):
    """
    Reads keystrokes from fd and queues decoded commands.

    Runs as a daemon so a blocked read never keeps the process alive. A
    short read or a read error ends the thread quietly.
    """

    def __init__(self, fd: int, commands: "queue.Queue[InputCommand]", chunk_size: int = 4):
        super().__init__(name="key-reader", daemon=True)
        self.fd = fd
        self.commands = commands
        self.chunk_size = chunk_size

    def run(self) -> None:
        while True:
            try:
                data = os.read(self.fd, self.chunk_size)
            except OSError as e:
                logger.debug("Key reader stopped: %s", e)
                return
            if not data:
                logger.debug("Key reader stopped: end of input")
                return
            command = decode_keys(data)
            if command is not None:
                self.commands.put(command)
