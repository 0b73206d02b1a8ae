# wiring.py
from __future__ import annotations

from debug import Debug
from errors import DomainError, InvalidWiringError
from letter import ALPHABET, SIZE, Letter

debug = Debug()


class WiringTable:
    """A fixed permutation of the alphabet, looked up in both directions.

    ``spec[i]`` is the letter that contact *i* is wired to, so ``"EKM..."``
    sends A to E, B to K and so on. Both tables are built here, once.
    """

    __slots__ = ("spec", "_fwd", "_rev")

    def __init__(self, spec: str) -> None:
        if len(spec) != SIZE:
            raise InvalidWiringError(
                f"wiring must have {SIZE} letters, got {len(spec)}: {spec!r}"
            )
        if sorted(spec) != list(ALPHABET):
            raise InvalidWiringError(f"wiring must be a permutation of A-Z: {spec!r}")

        self.spec = spec
        self._fwd = tuple(Letter(ALPHABET.index(c)) for c in spec)
        rev = [0] * SIZE
        for i, j in enumerate(self._fwd):
            rev[j] = i
        self._rev = tuple(Letter(i) for i in rev)
        debug.log("wiring", "built %s", spec)

    # ── lookups ──────────────────────────────────────────────────
    def forward(self, index: int) -> Letter:
        return self._fwd[check_index(index)]

    def reverse(self, index: int) -> Letter:
        return self._rev[check_index(index)]

    # ── properties of the permutation ────────────────────────────
    def is_involution(self) -> bool:
        return all(self._fwd[j] == i for i, j in enumerate(self._fwd))

    def fixed_points(self) -> list[Letter]:
        return [Letter(i) for i, j in enumerate(self._fwd) if i == j]

    @property
    def forward_table(self) -> tuple[Letter, ...]:
        return self._fwd

    @property
    def reverse_table(self) -> tuple[Letter, ...]:
        return self._rev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WiringTable):
            return NotImplemented
        return self.spec == other.spec

    def __hash__(self) -> int:
        return hash(self.spec)

    def __repr__(self) -> str:
        return f"<WiringTable {self.spec}>"


def check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SIZE:
        raise DomainError(f"lookup index {index!r} outside 0-{SIZE - 1}")
    return index
