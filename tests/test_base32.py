"""Tests for the base32 codec between 16-byte UUIDs and 26-char suffixes."""

import os

import pytest

from typeid.core import base32
from typeid.core.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    SuffixOverflowError,
    TypeIDError,
)
from tests.conftest import SEQUENCE_BYTES, SEQUENCE_SUFFIX


# ---------------------------------------------------------------------------
# Alphabet
# ---------------------------------------------------------------------------

class TestAlphabet:
    def test_has_32_unique_symbols(self):
        assert len(base32.ALPHABET) == 32
        assert len(set(base32.ALPHABET)) == 32

    def test_excludes_ambiguous_letters(self):
        for char in "ilou":
            assert char not in base32.ALPHABET

    def test_sorted_so_order_matches_value(self):
        assert list(base32.ALPHABET) == sorted(base32.ALPHABET)
        assert base32.ALPHABET.startswith("0123456789")


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------

class TestEncode:
    def test_byte_sequence_vector(self):
        assert base32.encode(SEQUENCE_BYTES) == SEQUENCE_SUFFIX

    def test_all_zero(self):
        assert base32.encode(bytes(16)) == "0" * 26

    def test_all_ones(self):
        assert base32.encode(b"\xff" * 16) == "7" + "z" * 25

    def test_low_bits_land_in_last_character(self):
        assert base32.encode((31).to_bytes(16, "big")) == "0" * 25 + "z"
        assert base32.encode((32).to_bytes(16, "big")) == "0" * 24 + "10"

    def test_output_is_26_chars_from_alphabet(self):
        encoded = base32.encode(os.urandom(16))
        assert len(encoded) == 26
        assert all(c in base32.ALPHABET for c in encoded)

    def test_accepts_bytearray(self):
        assert base32.encode(bytearray(SEQUENCE_BYTES)) == SEQUENCE_SUFFIX

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_wrong_byte_length_raises(self, length):
        with pytest.raises(InvalidLengthError):
            base32.encode(bytes(length))

    @pytest.mark.parametrize("data", [16, "0" * 16, None, [0] * 16])
    def test_non_bytes_input_raises(self, data):
        with pytest.raises(InvalidLengthError):
            base32.encode(data)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

class TestDecode:
    def test_byte_sequence_vector(self):
        assert base32.decode(SEQUENCE_SUFFIX) == SEQUENCE_BYTES

    def test_max_value(self):
        assert base32.decode("7" + "z" * 25) == b"\xff" * 16

    @pytest.mark.parametrize("text", ["", "abc", "0" * 25, "0" * 27])
    def test_wrong_length_raises(self, text):
        with pytest.raises(InvalidLengthError):
            base32.decode(text)

    @pytest.mark.parametrize("bad", ["i", "l", "o", "u", "A", "Z", "-", " ", "_"])
    def test_character_outside_alphabet_raises(self, bad):
        with pytest.raises(InvalidCharacterError):
            base32.decode("0" * 25 + bad)

    @pytest.mark.parametrize("first", ["8", "9", "a", "z"])
    def test_first_character_above_seven_overflows(self, first):
        with pytest.raises(SuffixOverflowError):
            base32.decode(first + "0" * 25)

    @pytest.mark.parametrize("value", [["0"] * 26, b"0" * 26, None])
    def test_non_str_input_raises(self, value):
        with pytest.raises(InvalidCharacterError, match="Expected a str"):
            base32.decode(value)

    def test_length_checked_before_characters(self):
        with pytest.raises(InvalidLengthError):
            base32.decode("UPPER")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            base32.decode("8" + "0" * 25)
        assert issubclass(SuffixOverflowError, TypeIDError)


# ---------------------------------------------------------------------------
# Round trips and ordering
# ---------------------------------------------------------------------------

class TestRoundTrip:
    def test_bytes_round_trip(self):
        for _ in range(200):
            data = os.urandom(16)
            assert base32.decode(base32.encode(data)) == data

    def test_text_round_trip(self):
        for text in [SEQUENCE_SUFFIX, "0" * 26, "7" + "z" * 25, "01h2e8kqvbfwea724h75qc655w"]:
            assert base32.encode(base32.decode(text)) == text


class TestOrdering:
    def test_string_order_matches_byte_order(self):
        values = [os.urandom(16) for _ in range(200)]
        by_bytes = sorted(values)
        by_text = sorted(values, key=base32.encode)
        assert by_bytes == by_text

    def test_later_timestamp_sorts_after(self):
        earlier = (1_700_000_000_000).to_bytes(6, "big") + b"\xff" * 10
        later = (1_700_000_000_001).to_bytes(6, "big") + b"\x00" * 10
        assert base32.encode(earlier) < base32.encode(later)
