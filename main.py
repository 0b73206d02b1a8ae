# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence, TextIO

from debug import COMPONENTS, Debug
from errors import EnigmaError
from settings import Settings
from utilities import encipher_stream, wrap
from wheels import ReflectorSpec, RotorSpec

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="enigma",
        description="Encipher or decipher text with a three-rotor Enigma. "
        "Running the ciphertext back through the same settings gives the plaintext.",
    )
    p.add_argument("input", nargs="?", type=Path, help="Input file (stdin if omitted)")
    p.add_argument("output", nargs="?", type=Path, help="Output file (stdout if omitted)")
    p.add_argument("--config", metavar="FILE", type=Path, help="Load machine settings from JSON. Flags below override it.")
    p.add_argument("-r", "--reflector", choices=ReflectorSpec.names(), type=str.upper, help="Reflector type (default B)")
    p.add_argument(
        "--rotors", nargs=3, metavar=("LEFT", "MIDDLE", "RIGHT"), type=str.upper,
        help=f"Rotor types, left to right, from {' '.join(RotorSpec.names())} (default I II III)",
    )
    p.add_argument("-p", "--positions", metavar="XYZ", type=str.upper, help="Initial rotor positions, left to right (default AAA)")
    p.add_argument("--plugs", nargs="*", metavar="AB", type=str.upper, help="Plugboard pairs, e.g. --plugs AV BS CG")
    p.add_argument("--double-step", dest="double_step", action="store_true", default=None, help="Reproduce the middle-rotor double step")
    p.add_argument("-w", "--width", type=int, default=80, help="Output line width, 0 for a single line (default 80)")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, metavar="COMPONENT", help=f"Log these components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", metavar="FILE", help="Also write debug logging to this file")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.load(args.config) if args.config else Settings()

    if args.reflector is not None:
        settings.reflector = args.reflector
    if args.rotors is not None:
        settings.rotors = list(args.rotors)
    if args.positions is not None:
        settings.positions = args.positions
    if args.plugs is not None:
        settings.plugs = list(args.plugs)
    if args.double_step is not None:
        settings.double_step = args.double_step
    return settings


def write_lines(out: TextIO, lines: List[str]) -> None:
    for line in lines:
        out.write(line + "\n")


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    if args.debug:
        Debug.configure(log_to=args.log_file)
        debug.enable(*args.debug)

    #  Everything is validated before a single letter is read
    try:
        machine = settings_from_args(args).build()
    except (OSError, EnigmaError) as e:
        sys.exit(f"Invalid configuration: {e}")

    try:
        if args.input:
            text = args.input.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
        cipher = "".join(encipher_stream(machine, text))
    except (OSError, UnicodeDecodeError, EnigmaError) as e:
        sys.exit(f"Failed to encipher input: {e}")

    lines = wrap(cipher, args.width)
    if args.output:
        with args.output.open("w", encoding="utf-8") as f:
            write_lines(f, lines)
    else:
        write_lines(sys.stdout, lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
