# letter.py
from __future__ import annotations

import string

from errors import InvalidLetterError

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


class Letter(int):
    """One contact of the machine: an index 0–25 tied to 'A'–'Z'.

    Everything past the keyboard works on Letters, never on raw characters,
    so the alphabet stays closed. ``Letter(3)`` and ``Letter("D")`` are the
    same value.
    """

    __slots__ = ()

    def __new__(cls, value: int | str | "Letter") -> "Letter":
        if isinstance(value, Letter):
            return value
        if isinstance(value, str):
            return cls.from_char(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLetterError(f"cannot cast value {value!r} to Letter")
        if not 0 <= value < SIZE:
            raise InvalidLetterError(f"cannot cast value {value} to Letter")
        return super().__new__(cls, value)

    @classmethod
    def from_index(cls, index: int) -> "Letter":
        return cls(index)

    @classmethod
    def from_char(cls, char: str) -> "Letter":
        if len(char) != 1 or char not in ALPHABET:
            raise InvalidLetterError(f"cannot cast value {char!r} to Letter")
        return super().__new__(cls, ALPHABET.index(char))

    @property
    def char(self) -> str:
        return ALPHABET[self]

    def shift(self, steps: int = 1) -> "Letter":
        """Return the letter *steps* places further round the alphabet."""
        return Letter((int(self) + steps) % SIZE)

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return f"Letter({self.char!r})"
