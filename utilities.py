# utilities.py
from __future__ import annotations

import string
from typing import Iterable, Iterator

from errors import InvalidLetterError
from keyboard_and_plugboard import Keyboard
from letter import ALPHABET, Letter

# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing
# ────────────────────────────────────────────────────────────────────────

_SKIP = frozenset(string.whitespace + string.punctuation)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(ALPHABET)
_KEYBOARD = Keyboard()


def sanitize(text: Iterable[str]) -> Iterator[str]:
    """Yield the message as bare A–Z, one character at a time.

    Whitespace and ASCII punctuation are dropped and lower case is folded.
    Anything else (digits, accented letters, control bytes) cannot be keyed
    on the machine and raises InvalidLetterError.
    """
    for ch in text:
        if ch in _UPPER:
            yield ch
        elif ch in _LOWER:
            yield ch.upper()
        elif ch in _SKIP:
            continue
        else:
            raise InvalidLetterError(f"cannot represent character {ch!r}")


def preprocess_message(msg: str) -> str:
    """Upper‑case and drop spacing and punctuation."""
    return "".join(sanitize(msg))


def to_letters(text: Iterable[str]) -> Iterator[Letter]:
    """Key the sanitized message, yielding one signal per character."""
    for ch in sanitize(text):
        yield _KEYBOARD.forward(ch)


def encipher_stream(machine, text: Iterable[str]) -> Iterator[str]:
    """Feed raw text through *machine*, yielding ciphertext characters."""
    for letter in to_letters(text):
        yield _KEYBOARD.backward(machine.encipher(letter))


# ────────────────────────────────────────────────────────────────────────
#  2. Output layout
# ────────────────────────────────────────────────────────────────────────


def group(text: str, block: int = 5) -> str:
    """Split *text* into space separated blocks, e.g. ``QMJID OMZWZ``."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def wrap(text: str, width: int = 80) -> list[str]:
    """Cut *text* into lines of at most *width*; ``width <= 0`` keeps one line."""
    if not text:
        return []
    if width <= 0:
        return [text]
    return [text[i : i + width] for i in range(0, len(text), width)]


__all__ = [
    "encipher_stream",
    "group",
    "preprocess_message",
    "sanitize",
    "to_letters",
    "wrap",
]
