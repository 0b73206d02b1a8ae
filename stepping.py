# stepping.py
from __future__ import annotations

from typing import Tuple

from debug import Debug
from letter import Letter

debug = Debug()

Positions = Tuple[Letter, Letter, Letter]


class SteppingUnit:
    """Advances a (left, middle, right) stack once per keypress.

    Every decision is taken from the positions *before* anything moves:

    * the right rotor always steps;
    * the middle rotor steps if the right rotor sat on a notch;
    * the left rotor steps when the middle rotor leaves a notch, i.e. it
      sat on a notch and is stepping on this keypress.

    With ``double_step=True`` a middle rotor sitting on its own notch is
    also carried along when it drives the left rotor, which is the pawl
    behaviour of the real machine.
    """

    def __init__(self, *, double_step: bool = False) -> None:
        self.double_step = double_step

    def decide(
        self, middle_at_notch: bool, right_at_notch: bool
    ) -> Tuple[bool, bool, bool]:
        """Return which of (left, middle, right) move on this keypress."""
        step_m = right_at_notch or (self.double_step and middle_at_notch)
        step_l = middle_at_notch and step_m
        return step_l, step_m, True

    def next_positions(self, left, middle, right) -> Positions:
        """Pure transition: the positions after one keypress, rotors untouched."""
        step_l, step_m, step_r = self.decide(middle.at_notch, right.at_notch)
        return (
            left.position.shift(step_l),
            middle.position.shift(step_m),
            right.position.shift(step_r),
        )

    def step(self, left, middle, right) -> Positions:
        # decide which rotors step (two-phase clarity)
        step_l, step_m, step_r = self.decide(middle.at_notch, right.at_notch)

        if step_l:
            left.advance()
        if step_m:
            middle.advance()
        if step_r:
            right.advance()

        positions = (left.position, middle.position, right.position)
        if debug.active("stepping"):
            debug.log("stepping", "window %s", "".join(p.char for p in positions))
        return positions

    def __repr__(self) -> str:
        return f"<SteppingUnit double_step={self.double_step}>"
