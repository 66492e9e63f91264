"""Raw key reading and screen clearing for the terminal."""

from __future__ import annotations

import os
import sys
from typing import IO

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]

CLEAR_SEQUENCE = "\033[H\033[2J"


def _terminal_fd(stream: IO[str]) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def getch(stream: IO[str] | None = None) -> str:
    """Read one character without waiting for Enter and without echo.

    On a non-terminal stream the character is simply read. Returns an
    empty string at end of input.
    """
    if stream is None:
        stream = sys.stdin
    fd = _terminal_fd(stream)
    if fd is None or termios is None:
        return stream.read(1)
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def clear_screen(out: IO[str] | None = None) -> None:
    """Clear the screen and move the cursor to the top left corner."""
    if out is None:
        out = sys.stdout
    out.write(CLEAR_SEQUENCE)
    out.flush()