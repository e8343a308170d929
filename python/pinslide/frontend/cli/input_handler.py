"""Single-keypress reader for the CLI frontends.

Arrow keys and WASD slide the empty cell, IJKL send the pin.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from pinslide.backend.models.move import Move
from pinslide.backend.models.position import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "i": "pin-up",
    "k": "pin-down",
    "j": "pin-left",
    "l": "pin-right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "v": "solve",
    "n": "hint",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"   — slide the empty cell
        "pin-up", "pin-down", ...        — move the pin
        "quit"                           — q / Ctrl-C / Escape
        "restart"                        — r
        "solve"                          — v (auto-solve)
        "hint"                           — n (next best move)
        "<char>"                         — unmapped printable char
        ""                               — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)


_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def action_to_move(action: str) -> Move | None:
    """Translate a movement action string into a :class:`Move`."""
    if action.startswith("pin-"):
        direction = _DIRECTIONS.get(action[4:])
        return Move.advance(direction) if direction is not None else None
    direction = _DIRECTIONS.get(action)
    return Move.slide(direction) if direction is not None else None
