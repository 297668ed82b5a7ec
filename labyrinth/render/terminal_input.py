"""Non-blocking keyboard input for the Rich editor loop."""

from __future__ import annotations

import select
import sys
import termios
import time
import tty
from contextlib import contextmanager
from dataclasses import dataclass

ESC_TIMEOUT = 0.05

_ARROWS = {"A": "UP", "B": "DOWN", "C": "RIGHT", "D": "LEFT"}


@dataclass(frozen=True)
class KeyEvent:
    key: str


class KeyReader:
    """Buffers raw stdin characters and decodes them into KeyEvents."""

    def __init__(self) -> None:
        self._buffer = ""
        self._esc_pending_at: float | None = None

    def read(self) -> KeyEvent | None:
        self._drain_stdin()
        return self.decode()

    def feed(self, chars: str) -> None:
        self._buffer += chars

    def decode(self) -> KeyEvent | None:
        if not self._buffer:
            return None
        if self._buffer[0] == "\x1b":
            return self._decode_escape()
        self._esc_pending_at = None
        key = self._buffer[0]
        self._buffer = self._buffer[1:]
        if key in {"\r", "\n"}:
            return KeyEvent("ENTER")
        if key == " ":
            return KeyEvent("SPACE")
        if key == "\x7f":
            return KeyEvent("BACKSPACE")
        return KeyEvent(key)

    def _drain_stdin(self) -> None:
        while True:
            ready, _, _ = select.select([sys.stdin], [], [], 0)
            if not ready:
                return
            chunk = sys.stdin.read(1)
            if chunk == "":
                return
            self._buffer += chunk

    def _decode_escape(self) -> KeyEvent | None:
        buffer = self._buffer
        if buffer == "\x1b":
            # A lone ESC may be the first byte of an arrow key.
            now = time.monotonic()
            if self._esc_pending_at is None:
                self._esc_pending_at = now
                return None
            if now - self._esc_pending_at < ESC_TIMEOUT:
                return None
            self._esc_pending_at = None
            self._buffer = ""
            return KeyEvent("ESC")
        self._esc_pending_at = None
        if buffer[1] in {"[", "O"}:
            if len(buffer) < 3:
                return None
            for idx in range(2, len(buffer)):
                char = buffer[idx]
                if char.isalpha() or char == "~":
                    self._buffer = buffer[idx + 1 :]
                    name = _ARROWS.get(buffer[2 : idx + 1])
                    return KeyEvent(name) if name else None
            return None
        self._buffer = buffer[1:]
        return KeyEvent("ESC")


@contextmanager
def raw_terminal():
    if not sys.stdin.isatty():
        yield
        return
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        new_settings = termios.tcgetattr(fd)
        new_settings[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, new_settings)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
