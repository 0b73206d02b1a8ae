# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import InvalidWiringError, UnknownRotorError
from letter import ALPHABET, SIZE, Letter
from wheels import ReflectorSpec, RotorSpec
from wiring import WiringTable, check_index

debug = Debug()

NO_NOTCH = SIZE  # fills the unused notch slot; never a valid position


class Rotor:
    """One wheel of the stack.

    The position shift is applied on the way in and taken off on the way
    out, for both signal directions, so ``exit`` undoes ``enter`` at every
    position. All 26 shifted tables for each direction are built here.
    """

    def __init__(self, spec: RotorSpec, position: int = 0) -> None:
        if not isinstance(spec, RotorSpec):
            raise UnknownRotorError(f"not a rotor type: {spec!r}")
        if not 1 <= len(spec.notches) <= 2:
            raise InvalidWiringError(f"rotor {spec.name} needs one or two notches")

        self.spec = spec
        self.wiring = WiringTable(spec.wiring)

        notches = [Letter(c) for c in spec.notches]
        notches += [NO_NOTCH] * (2 - len(notches))
        self.notches: tuple[int, int] = tuple(notches)

        fwd, rev = self.wiring.forward_table, self.wiring.reverse_table
        # table[p][i]: contact i in, contact out, with the rotor at position p
        self._enter = tuple(
            tuple(Letter((fwd[(i + p) % SIZE] - p) % SIZE) for i in range(SIZE))
            for p in range(SIZE)
        )
        self._exit = tuple(
            tuple(Letter((rev[(i + p) % SIZE] - p) % SIZE) for i in range(SIZE))
            for p in range(SIZE)
        )

        self.position = position

    @property
    def position(self) -> Letter:
        return self._position

    @position.setter
    def position(self, value: int | str) -> None:
        self._position = Letter(value)

    # ── signal paths ---------------------------------------------
    def enter(self, sig: int) -> Letter:
        """Right-to-left pass, towards the reflector."""
        return self._enter[self.position][check_index(sig)]

    def exit(self, sig: int) -> Letter:
        """Left-to-right pass, back from the reflector."""
        return self._exit[self.position][check_index(sig)]

    # ── notch & stepping -----------------------------------------
    def is_notch(self, position: int | None = None) -> bool:
        """True if *position* (default: the current one) is a notch."""
        if position is None:
            position = self.position
        return check_index(position) in self.notches

    @property
    def at_notch(self) -> bool:
        return self.is_notch(self.position)

    def advance(self, steps: int = 1) -> Letter:
        self.position = self.position.shift(steps)
        if debug.active("rotor"):
            debug.log("rotor", "%s -> %s", self.spec.name, self.position.char)
        return self.position

    # ── niceties --------------------------------------------------
    @property
    def notch_letters(self) -> str:
        return "".join(ALPHABET[n] for n in self.notches if n != NO_NOTCH)

    def __repr__(self) -> str:
        return f"<Rotor {self.spec.name} pos={self.position.char} notches={self.notch_letters}>"


class Reflector:
    def __init__(self, spec: ReflectorSpec | str) -> None:
        if isinstance(spec, ReflectorSpec):
            self.spec: ReflectorSpec | None = spec
            wiring = WiringTable(spec.wiring)
        else:
            # a bare wiring string; used for custom or test reflectors
            self.spec = None
            wiring = WiringTable(spec)

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        if wiring.fixed_points():
            bad = "".join(l.char for l in wiring.fixed_points())
            raise InvalidWiringError(f"Reflector wiring maps {bad} to itself")
        if not wiring.is_involution():
            raise InvalidWiringError("Reflector wiring must be an involution")

        self.wiring = wiring

    def reflect(self, sig: int) -> Letter:
        out = self.wiring.forward(sig)
        if debug.active("reflector"):
            debug.log("reflector", "%s->%s", ALPHABET[sig], out.char)
        return out

    def __repr__(self) -> str:
        name = self.spec.name if self.spec else self.wiring.spec
        return f"<Reflector {name}>"
