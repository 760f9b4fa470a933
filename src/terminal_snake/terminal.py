"""Non-blocking keyboard input for the terminal."""

from __future__ import annotations

import enum
import logging
import os
import sys
from typing import TextIO

if os.name == "nt":
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


_ESC = "\x1b"

_SEQUENCES: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
}

# Arrow scan codes that follow the 0xE0 / 0x00 prefix on Windows.
_SCAN_CODES: dict[bytes, Key] = {
    b"H": Key.UP,
    b"P": Key.DOWN,
    b"K": Key.LEFT,
    b"M": Key.RIGHT,
}


def decode_key(sequence: str) -> Key:
    """Map a raw key sequence to a :class:`Key`."""
    return _SEQUENCES.get(sequence, Key.OTHER)


class KeyReader:
    """Peek-then-read keyboard source that never blocks.

    Use as a context manager to switch a TTY into cbreak mode for the
    duration of the game; the previous mode is restored on exit.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._saved_mode: list | None = None

    def __enter__(self) -> KeyReader:
        if os.name != "nt" and self.stream.isatty():
            fd = self.stream.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            logger.debug("Terminal switched to cbreak mode.")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(
                self.stream.fileno(), termios.TCSADRAIN, self._saved_mode,
            )
            self._saved_mode = None
            logger.debug("Terminal mode restored.")

    def key_available(self) -> bool:
        """Return True if a key press is waiting."""
        if os.name == "nt":
            return msvcrt.kbhit()
        return self._readable()

    def read_key(self) -> Key:
        """Consume one key press. Call only after :meth:`key_available`."""
        if os.name == "nt":
            return self._read_key_windows()
        return self._read_key_posix()

    def _readable(self) -> bool:
        readable, _, _ = select.select([self.stream.fileno()], [], [], 0)
        return bool(readable)

    def _read_char(self) -> str:
        return os.read(self.stream.fileno(), 1).decode(errors="replace")

    def _read_key_posix(self) -> Key:
        seq = self._read_char()
        if seq == _ESC:
            # Arrow keys arrive as ESC [ <letter>.
            for _ in range(2):
                if not self._readable():
                    break
                seq += self._read_char()
        return decode_key(seq)

    def _read_key_windows(self) -> Key:
        ch = msvcrt.getch()
        if ch not in (b"\x00", b"\xe0"):
            return Key.OTHER
        return _SCAN_CODES.get(msvcrt.getch(), Key.OTHER)
