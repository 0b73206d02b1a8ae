# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from typing import Iterable, Iterator

from debug import Debug
from errors import DuplicateRotorError, InvalidLetterError, InvalidPositionError
from letter import Letter
from rotor_and_reflector import Reflector, Rotor
from stepping import Positions, SteppingUnit
from wheels import ReflectorSpec, RotorSpec

debug = Debug()

SLOTS = ("left", "middle", "right")


def _position(slot: str, value: Letter | int | str) -> Letter:
    try:
        return Letter(value)
    except InvalidLetterError:
        raise InvalidPositionError(
            f"{slot.capitalize()} rotor position must be A-Z, got {value!r}"
        ) from None


class Machine:
    """Three rotors, one reflector, and the positions that change per letter.

    A Machine is a single session: it is not safe to share one between
    threads. Build one per stream instead, they are cheap.
    """

    def __init__(
        self,
        reflector: ReflectorSpec | str,
        left: RotorSpec | str,
        middle: RotorSpec | str,
        right: RotorSpec | str,
        left_pos: Letter | int | str = 0,
        middle_pos: Letter | int | str = 0,
        right_pos: Letter | int | str = 0,
        *,
        double_step: bool = False,
    ) -> None:
        specs = [RotorSpec.parse(r) for r in (left, middle, right)]
        for i in range(3):
            for j in range(i + 1, 3):
                if specs[i] is specs[j]:
                    raise DuplicateRotorError(
                        f"{SLOTS[i].capitalize()} rotor and {SLOTS[j]} rotor "
                        f"cannot be the same ({specs[i].name})."
                    )

        initial = tuple(
            _position(slot, value)
            for slot, value in zip(SLOTS, (left_pos, middle_pos, right_pos))
        )

        self.reflector = Reflector(ReflectorSpec.parse(reflector))
        self.left, self.middle, self.right = (Rotor(s) for s in specs)
        self.stepping = SteppingUnit(double_step=double_step)
        self.initial: Positions = initial
        self.reset()

    # ── key helpers ─────────────────────────────────────────────

    @property
    def rotors(self) -> tuple[Rotor, Rotor, Rotor]:
        return self.left, self.middle, self.right

    @property
    def positions(self) -> Positions:
        return self.left.position, self.middle.position, self.right.position

    @property
    def window(self) -> str:
        """The three letters showing through the lid, left to right."""
        return "".join(p.char for p in self.positions)

    def reset(self) -> None:
        """Turn every rotor back to its initial position."""
        for rotor, pos in zip(self.rotors, self.initial):
            rotor.position = pos

    # ── encipher one letter ─────────────────────────────────────

    def encipher(self, letter: Letter) -> Letter:
        letter = Letter(letter)

        signal = self.right.enter(letter)
        signal = self.middle.enter(signal)
        signal = self.left.enter(signal)

        signal = self.reflector.reflect(signal)

        signal = self.left.exit(signal)
        signal = self.middle.exit(signal)
        out = self.right.exit(signal)

        if debug.active("encipher"):
            debug.log("encipher", "%s %s->%s", self.window, letter.char, out.char)
        self.stepping.step(self.left, self.middle, self.right)
        return out

    def encipher_all(self, letters: Iterable[Letter]) -> Iterator[Letter]:
        for letter in letters:
            yield self.encipher(letter)

    def encipher_text(self, text: str) -> str:
        """Encipher a string that is already nothing but A–Z."""
        return "".join(self.encipher(Letter.from_char(ch)).char for ch in text)

    def __repr__(self) -> str:
        names = "-".join(r.spec.name for r in self.rotors)
        return f"<Machine {self.reflector!r} {names} window={self.window}>"
