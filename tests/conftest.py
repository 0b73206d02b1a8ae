"""Shared fixtures for the Enigma tests."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

# Modules live flat at the repo root
sys.path.insert(0, str(ROOT))

from debug import Debug  # noqa: E402
from machine import Machine  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_debug():
    """Every test starts and ends with all log components off."""
    dbg = Debug()
    snapshot = dbg.status()
    dbg.toggle_global(True)
    yield dbg
    for name, on in snapshot.items():
        (dbg.enable if on else dbg.disable)(name)
    dbg.toggle_global(True)


@pytest.fixture
def machine():
    """Reflector B, rotors I II III, window AAA."""
    return Machine("B", "I", "II", "III", "A", "A", "A")


@pytest.fixture
def long_message():
    """A plaintext long enough to carry the middle and left rotors round."""
    text = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
    return (text * 25)[:800]
