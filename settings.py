# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from errors import ConfigError
from keyboard_and_plugboard import Plugboard, PluggedMachine
from machine import Machine

REQUIRED = {"reflector", "rotors", "positions"}


def _text(key: str, value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {value!r}")
    return value


def _words(key: str, value: object) -> List[str]:
    """A list of strings, or one space separated string."""
    if isinstance(value, str):
        return value.split()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings, got {value!r}")
    return list(value)


@dataclass(slots=True)
class Settings:
    """Everything needed to rebuild the same machine on both ends."""

    reflector: str = "B"
    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    positions: str = "AAA"
    plugs: List[str] = field(default_factory=list)
    double_step: bool = False

    # ── loading ─────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        missing = REQUIRED - data.keys()
        if missing:
            raise ConfigError(f"Missing keys in config: {', '.join(sorted(missing))}")

        double_step = data.get("double_step", False)
        if not isinstance(double_step, bool):
            raise ConfigError(f"double_step must be true or false, got {double_step!r}")

        plugs = _words("plugs", data.get("plugs", data.get("plugboard", [])))

        return cls(
            reflector=_text("reflector", data["reflector"]),
            rotors=_words("rotors", data["rotors"]),
            positions=_text("positions", data["positions"]),
            plugs=[p.upper() for p in plugs],
            double_step=double_step,
        )

    @classmethod
    def load(cls, path: str | Path) -> "Settings":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"{path}: not valid JSON ({e})") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)

    def dump(self, path: str | Path) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    # ── building ────────────────────────────────────────────────

    def build(self) -> Machine | PluggedMachine:
        if len(self.rotors) != 3:
            raise ConfigError(f"Need exactly 3 rotors, got {len(self.rotors)}")
        if len(self.positions) != 3:
            raise ConfigError(
                f"Need exactly 3 starting positions, got {self.positions!r}"
            )

        left, middle, right = self.rotors
        machine = Machine(
            self.reflector,
            left,
            middle,
            right,
            *self.positions,
            double_step=self.double_step,
        )
        if not self.plugs:
            return machine
        return PluggedMachine(machine, Plugboard(self.plugs))
