"""Logical key events and translation from raw readchar keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import readchar


class KeyKind(Enum):
    """Logical keys understood by the navigator."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    BACK = "back"
    EXIT = "exit"
    CHAR = "char"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """One key press. ``char`` is set only for KeyKind.CHAR."""

    kind: KeyKind
    char: str | None = None

    @classmethod
    def of(cls, char: str) -> KeyEvent:
        """Literal character key."""
        return cls(KeyKind.CHAR, char)


UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
ENTER = KeyEvent(KeyKind.ENTER)
BACK = KeyEvent(KeyKind.BACK)
EXIT = KeyEvent(KeyKind.EXIT)
OTHER = KeyEvent(KeyKind.OTHER)

ENTER_KEYS = ("\r", "\n", readchar.key.ENTER)
BACK_KEYS = ("\x7f", "\x08", readchar.key.BACKSPACE)
VI_KEYS = {"k": UP, "j": DOWN}

# readchar keeps reading past Esc only for these prefixes (arrows, F-keys, ...)
ESCAPE_SEQUENCE_PREFIXES = ("\x1b[", "\x1bO")


def translate_key(raw: str, vi_keys: bool = False) -> KeyEvent:
    """Map a raw key string from readchar.readkey() to a logical key.

    Args:
        raw: Key string as returned by readchar
        vi_keys: Treat j/k as down/up instead of literal characters

    Returns:
        KeyEvent; unrecognized keys map to KeyKind.OTHER
    """
    if raw == readchar.key.UP:
        return UP
    if raw == readchar.key.DOWN:
        return DOWN
    if raw in ENTER_KEYS:
        return ENTER
    if raw in BACK_KEYS:
        return BACK
    if raw.startswith(readchar.key.ESC) and not raw.startswith(ESCAPE_SEQUENCE_PREFIXES):
        # On POSIX readchar returns Esc joined with the next key, e.g. "\x1b\x1b"
        return EXIT
    if vi_keys and raw in VI_KEYS:
        return VI_KEYS[raw]
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent.of(raw)
    return OTHER
