"""Tests for the text stream helpers."""
import pytest

from errors import InvalidLetterError
from letter import Letter
from machine import Machine
from utilities import encipher_stream, group, preprocess_message, sanitize, to_letters, wrap


class TestSanitize:
    def test_drops_space_and_punctuation(self):
        assert preprocess_message("Hello, world!") == "HELLOWORLD"

    def test_upper_and_lower_case_agree(self):
        assert preprocess_message("Hello, world!") == preprocess_message("HELLO, WORLD!!!!")

    def test_newlines_and_tabs_dropped(self):
        assert preprocess_message("a\tb\nc\r\n") == "ABC"

    def test_is_lazy(self):
        stream = sanitize("Ab1")
        assert next(stream) == "A"
        assert next(stream) == "B"
        with pytest.raises(InvalidLetterError):
            next(stream)

    @pytest.mark.parametrize("bad", ["2", "é", "\x00", "ß"])
    def test_rejects_unrepresentable(self, bad):
        with pytest.raises(InvalidLetterError):
            preprocess_message("ok" + bad)

    def test_to_letters(self):
        assert list(to_letters("a-c")) == [Letter("A"), Letter("C")]

    def test_to_letters_keys_through_the_keyboard(self, monkeypatch):
        import utilities
        from keyboard_and_plugboard import Keyboard

        keyed = []

        class RecordingKeyboard(Keyboard):
            def forward(self, letter):
                keyed.append(letter)
                return super().forward(letter)

        monkeypatch.setattr(utilities, "_KEYBOARD", RecordingKeyboard())
        assert list(to_letters("x y")) == [Letter("X"), Letter("Y")]
        assert keyed == ["X", "Y"]


class TestEncipherStream:
    def test_matches_machine(self):
        out = "".join(encipher_stream(Machine("B", "I", "II", "III", "A", "A", "B"), "aa aa, a!"))
        assert out == "BDZGO"

    def test_round_trip_through_raw_text(self):
        text = "This is the first line.\nThis is the second line!!\n"
        cipher = "".join(encipher_stream(Machine("C", "II", "V", "VIII"), text))
        plain = "".join(encipher_stream(Machine("C", "II", "V", "VIII"), cipher))
        assert plain == preprocess_message(text)


class TestLayout:
    def test_wrap_default_width(self):
        lines = wrap("A" * 170)
        assert [len(l) for l in lines] == [80, 80, 10]

    def test_wrap_exact_multiple(self):
        assert wrap("ABCDEF", 3) == ["ABC", "DEF"]

    def test_wrap_disabled(self):
        assert wrap("A" * 170, 0) == ["A" * 170]

    def test_wrap_empty(self):
        assert wrap("") == []

    def test_group(self):
        assert group("BDZGOWCXLT") == "BDZGO WCXLT"
        assert group("ABCDEFG", 3) == "ABC DEF G"
        assert group("ABC", 0) == "ABC"
