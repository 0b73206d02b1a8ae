# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import InvalidLetterError, PlugboardError
from letter import ALPHABET, SIZE, Letter
from wiring import WiringTable

debug = Debug()

MAX_PAIRS = SIZE // 2
LETTERS = frozenset(ALPHABET)


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """The character ↔ Letter boundary."""

    # letter → Letter signal
    def forward(self, letter: str) -> Letter:
        try:
            return Letter.from_char(letter)
        except InvalidLetterError:
            raise InvalidLetterError(f"Invalid character {letter!r} for A-Z keyboard.") from None

    # Letter signal → character
    def backward(self, signal: int) -> str:
        return Letter(signal).char


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        mapping: dict[str, str] = {ch: ch for ch in ALPHABET}
        used: set[str] = set()

        if len(pairs) > MAX_PAIRS:
            raise PlugboardError(f"At most {MAX_PAIRS} plug pairs, got {len(pairs)}")

        for raw in pairs:
            # "AB" and ("A", "B") both normalise to (a, b)
            if len(raw) != 2:
                raise PlugboardError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw

            if a not in LETTERS or b not in LETTERS:
                bad = a if a not in LETTERS else b
                raise PlugboardError(f"Symbol {bad!r} not in alphabet")
            if a == b:
                raise PlugboardError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise PlugboardError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            mapping[a], mapping[b] = b, a
            used.update((a, b))

        self.wiring = WiringTable("".join(mapping[ch] for ch in ALPHABET))
        self.pairs: tuple[str, ...] = tuple(
            a + b for a, b in mapping.items() if a < b
        )

    # one private helper does the job for both directions
    def _map(self, signal: int) -> Letter:
        mapped = self.wiring.forward(signal)
        if debug.active("plugboard"):
            debug.log("plugboard", "%s->%s", ALPHABET[signal], mapped.char)
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"


# ── Plugged machine ───────────────────────────────────────────────
class PluggedMachine:
    """Puts a plugboard in front of a Machine without touching it.

    The swap runs once before the right rotor and once after it, so the
    wrapped Machine keeps its own guarantees.
    """

    def __init__(self, machine, plugboard: Plugboard) -> None:
        self.machine = machine
        self.plugboard = plugboard

    def encipher(self, letter: Letter) -> Letter:
        signal = self.plugboard.forward(Letter(letter))
        signal = self.machine.encipher(signal)
        return self.plugboard.backward(signal)

    def encipher_all(self, letters):
        for letter in letters:
            yield self.encipher(letter)

    def encipher_text(self, text: str) -> str:
        return "".join(self.encipher(Letter.from_char(ch)).char for ch in text)

    # position state lives in the wrapped machine
    @property
    def positions(self):
        return self.machine.positions

    @property
    def window(self) -> str:
        return self.machine.window

    def reset(self) -> None:
        self.machine.reset()

    def __repr__(self) -> str:
        return f"<PluggedMachine {self.plugboard!r} {self.machine!r}>"
