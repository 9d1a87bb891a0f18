"""Single-keypress reader for the terminal frontend.

Keys are read without waiting for Enter and turned into action names
("up", "restart", "enter", ...) through ``BINDINGS``.
"""

from __future__ import annotations

import os
import sys

BINDINGS: dict[str, tuple[str, ...]] = {
    "up": ("w", "W"),
    "down": ("s", "S"),
    "left": ("a", "A"),
    "right": ("d", "D"),
    "restart": ("r", "R"),
    "next": ("n", "N"),
    "prev": ("p", "P"),
    "enter": ("\r", "\n", " "),
    "quit": ("q", "Q", "\x03"),
}

_ACTIONS: dict[str, str] = {
    key: action for action, keys in BINDINGS.items() for key in keys
}

# Final byte of the ANSI cursor sequences ESC [ A..D.
_CSI_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}


if os.name == "nt":
    import msvcrt  # type: ignore[import-not-found]

    def _read_char() -> str:
        return msvcrt.getwch()

else:
    import termios
    import tty

    def _read_char() -> str:
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def action_for(char: str) -> str:
    """Action bound to *char*, the char itself if printable, else ``""``."""
    if char in _ACTIONS:
        return _ACTIONS[char]
    return char if char.isprintable() else ""


def get_key() -> str:
    """Block for one keypress and return its action name.

    Arrow keys map to the movement actions and a bare Escape to "quit".
    """
    char = _read_char()
    if char != "\x1b":
        return action_for(char)
    if _read_char() != "[":
        return "quit"
    return _CSI_ARROWS.get(_read_char(), "")
