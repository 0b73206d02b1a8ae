# wheels.py
"""Wheel database: the historical rotor and reflector wirings.

These are process-wide constants. Machines build their own Rotor and
Reflector objects from them and never write back.
"""
from __future__ import annotations

from enum import Enum

from errors import UnknownReflectorError, UnknownRotorError


class RotorSpec(Enum):
    """Army/air-force rotors I–VIII: (wiring, notch letters)."""

    I    = ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q")
    II   = ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E")
    III  = ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V")
    IV   = ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J")
    V    = ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z")
    VI   = ("JPGVOUMFYQBENHZRDKASXLICTW", "ZM")
    VII  = ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM")
    VIII = ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM")

    @property
    def wiring(self) -> str:
        return self.value[0]

    @property
    def notches(self) -> str:
        return self.value[1]

    @classmethod
    def parse(cls, name: "str | RotorSpec") -> "RotorSpec":
        """Look a rotor up by its roman numeral, e.g. ``"iv"`` -> ``RotorSpec.IV``."""
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnknownRotorError(
                f"invalid rotor type {name!r}; expected one of {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]

    def __str__(self) -> str:
        return self.name


class ReflectorSpec(Enum):
    # A is the pre-war wide reflector; B and C were the usual wartime ones
    A = "EJMZALYXVBWFCRQUONTSPIKHGD"
    B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"
    C = "FVPJIAOYEDRZXWGCTKUQSBNMHL"

    @property
    def wiring(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | ReflectorSpec") -> "ReflectorSpec":
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnknownReflectorError(
                f"invalid reflector type {name!r}; expected one of {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]

    def __str__(self) -> str:
        return self.name
