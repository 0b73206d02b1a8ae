"""Tests for the three-rotor machine."""
import pytest

from errors import (
    ConfigError,
    DuplicateRotorError,
    InvalidLetterError,
    InvalidPositionError,
    UnknownReflectorError,
    UnknownRotorError,
)
from letter import ALPHABET, Letter
from machine import Machine
from wheels import ReflectorSpec, RotorSpec


def fresh():
    return Machine(ReflectorSpec.B, RotorSpec.I, RotorSpec.II, RotorSpec.III, "A", "A", "A")


# ---- Historical vectors ----

class TestKnownVectors:
    @pytest.mark.parametrize("plain, cipher", [
        ("A", "U"), ("B", "E"), ("C", "J"), ("D", "O"), ("F", "T"),
    ])
    def test_first_keypress(self, plain, cipher):
        assert fresh().encipher(Letter(plain)) == Letter(cipher)

    def test_first_keypress_is_reciprocal(self):
        for ch in ALPHABET:
            out = fresh().encipher(Letter(ch))
            assert fresh().encipher(out) == Letter(ch)

    def test_aaaaa_from_aab(self):
        # The textbook BDZGO vector, whose first letter is read at window AAB
        m = Machine("B", "I", "II", "III", "A", "A", "B")
        assert m.encipher_text("AAAAA") == "BDZGO"

    def test_aaaaa_from_aaa(self):
        m = fresh()
        assert m.encipher_text("AAAAA") == "U" + "BDZG"


# ---- Self-reciprocity ----

CONFIGS = [
    ("B", "I", "II", "III", "A", "A", "A"),
    ("A", "IV", "V", "VI", "Q", "E", "V"),
    ("C", "VIII", "VII", "I", "Z", "Z", "Z"),
    ("B", "II", "IV", "VIII", "M", "L", "Y"),
]


class TestReciprocity:
    @pytest.mark.parametrize("config", CONFIGS)
    @pytest.mark.parametrize("double_step", [False, True])
    def test_decipher_with_same_settings(self, config, double_step, long_message):
        cipher = Machine(*config, double_step=double_step).encipher_text(long_message)
        assert cipher != long_message
        plain = Machine(*config, double_step=double_step).encipher_text(cipher)
        assert plain == long_message

    def test_reset_replays_the_session(self, machine, long_message):
        cipher = machine.encipher_text(long_message)
        machine.reset()
        assert machine.window == "AAA"
        assert machine.encipher_text(cipher) == long_message

    @pytest.mark.parametrize("config", CONFIGS)
    def test_no_letter_enciphers_to_itself(self, config, long_message):
        m = Machine(*config)
        for ch in long_message:
            assert m.encipher(Letter(ch)) != Letter(ch)

    def test_substitution_changes_every_press(self, machine):
        out = machine.encipher_text("A" * 26)
        assert len(set(out)) > 1

    def test_encipher_all_is_lazy(self, machine):
        stream = machine.encipher_all(Letter(ch) for ch in "AAAAA")
        assert machine.window == "AAA"
        assert next(stream) == Letter("U")
        assert machine.window == "AAB"


# ---- Construction ----

class TestConstruction:
    @pytest.mark.parametrize("rotors", [
        ("I", "II", "I"),
        ("I", "I", "III"),
        ("V", "II", "II"),
        ("VI", "VI", "VI"),
    ])
    def test_duplicate_rotor(self, rotors):
        with pytest.raises(DuplicateRotorError):
            Machine("B", *rotors)

    def test_duplicate_mixes_names_and_members(self):
        with pytest.raises(DuplicateRotorError):
            Machine("B", RotorSpec.I, "ii", "i")

    def test_duplicate_is_a_config_error(self):
        with pytest.raises(ConfigError):
            Machine("B", "I", "II", "I")

    @pytest.mark.parametrize("bad", ["a", "1", "", "AB", 26, -1, None, "#"])
    def test_invalid_position(self, bad):
        with pytest.raises(InvalidPositionError):
            Machine("B", "I", "II", "III", "A", bad, "A")

    def test_invalid_position_names_the_slot(self):
        with pytest.raises(InvalidPositionError, match="Right"):
            Machine("B", "I", "II", "III", "A", "A", "?")

    def test_unknown_rotor(self):
        with pytest.raises(UnknownRotorError):
            Machine("B", "I", "II", "IX")

    def test_unknown_reflector(self):
        with pytest.raises(UnknownReflectorError):
            Machine("D", "I", "II", "III")

    @pytest.mark.parametrize("positions", [
        ("C", "D", "E"),
        (2, 3, 4),
        (Letter(2), Letter("D"), "E"),
    ])
    def test_positions_accept_letters_ints_and_chars(self, positions):
        m = Machine("B", "I", "II", "III", *positions)
        assert m.window == "CDE"

    def test_defaults_to_home_position(self):
        assert Machine("B", "III", "II", "I").window == "AAA"

    def test_rotors_in_slot_order(self):
        m = Machine("C", "V", "I", "VII")
        assert [r.spec for r in m.rotors] == [RotorSpec.V, RotorSpec.I, RotorSpec.VII]
        assert m.reflector.spec is ReflectorSpec.C


# ---- Runtime ----

class TestEncipher:
    def test_total_over_the_alphabet(self, machine):
        for ch in ALPHABET * 3:
            assert isinstance(machine.encipher(Letter(ch)), Letter)

    def test_rejects_bad_input_at_the_boundary(self, machine):
        with pytest.raises(InvalidLetterError):
            machine.encipher(26)
        assert machine.window == "AAA"

    def test_encipher_text_rejects_lowercase(self, machine):
        with pytest.raises(InvalidLetterError):
            machine.encipher_text("a")

    def test_repr(self, machine):
        assert "I-II-III" in repr(machine)
        assert "AAA" in repr(machine)
