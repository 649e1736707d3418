"""
Tests for BinarySequence

Validates:
- '0'/'1' codec in both directions
- Rejection of any other character
- Structural equality and length-then-lexicographic ordering
- Immutability
"""

from itertools import product

import pytest

from .errors import AnnotationValidationError, TargetDecodeError
from .sequences import BinarySequence, Symbol


class TestBinarySequenceCodec:
    """Test encode / try_parse / parse."""

    def test_parse_maps_characters_to_symbols(self):
        """'1' is HIGH and '0' is LOW, in order."""
        seq = BinarySequence.parse("101")

        assert seq.symbols == (Symbol.HIGH, Symbol.LOW, Symbol.HIGH)
        assert len(seq) == 3
        assert seq[1] is Symbol.LOW

    def test_encode_has_no_delimiters(self):
        """Encoding is one character per symbol."""
        seq = BinarySequence([Symbol.LOW, Symbol.HIGH, Symbol.HIGH, Symbol.LOW])

        assert seq.encode() == "0110"
        assert str(seq) == "0110"

    def test_empty_string_is_empty_sequence(self):
        """Zero-length sequences are allowed."""
        seq = BinarySequence.parse("")

        assert len(seq) == 0
        assert seq.encode() == ""

    @pytest.mark.parametrize("text", ["102", "1 0", " 10", "10\n", "abc", "１"])
    def test_try_parse_rejects_other_characters(self, text):
        """Any character other than '0' or '1' fails."""
        assert BinarySequence.try_parse(text) is None

    def test_try_parse_rejects_non_strings(self):
        """Non-string input is a failure value, not an exception."""
        assert BinarySequence.try_parse(None) is None
        assert BinarySequence.try_parse(101) is None

    def test_parse_raises_decode_error(self):
        """parse() raises with the offending value."""
        with pytest.raises(TargetDecodeError) as exc_info:
            BinarySequence.parse("12")

        assert exc_info.value.value == "12"
        assert exc_info.value.type_name == "BinarySequence"

    def test_codec_is_a_bijection_on_short_strings(self):
        """encode(parse(s)) == s for every '0'/'1' string up to length 4."""
        for length in range(5):
            for chars in product("01", repeat=length):
                text = "".join(chars)
                assert BinarySequence.parse(text).encode() == text


class TestBinarySequenceConstruction:
    """Test building sequences from symbols."""

    def test_accepts_ints_and_bools(self):
        """0/1 and False/True are converted to symbols."""
        assert BinarySequence([1, 0, True, False]).encode() == "1010"

    def test_rejects_other_values(self):
        """Anything but 0/1/bool/Symbol fails immediately."""
        with pytest.raises(AnnotationValidationError):
            BinarySequence([1, 2])

        with pytest.raises(AnnotationValidationError):
            BinarySequence(["1"])

    def test_of_length(self):
        """of_length repeats one symbol."""
        assert BinarySequence.of_length(3, Symbol.HIGH).encode() == "111"
        assert BinarySequence.of_length(0).encode() == ""

        with pytest.raises(AnnotationValidationError):
            BinarySequence.of_length(-1)

    def test_sequence_is_frozen(self):
        """Sequences cannot be mutated."""
        seq = BinarySequence.parse("11")

        with pytest.raises(AttributeError):
            seq.symbols = (Symbol.LOW,)  # type: ignore


class TestBinarySequenceComparison:
    """Test equality, hashing and ordering."""

    def test_structural_equality(self):
        """Equal iff same symbols in the same order."""
        assert BinarySequence.parse("110") == BinarySequence([1, 1, 0])
        assert BinarySequence.parse("110") != BinarySequence.parse("011")
        assert BinarySequence.parse("11") != BinarySequence.parse("110")

    def test_hash_matches_equality(self):
        """Equal sequences collapse in a set."""
        values = {BinarySequence.parse("01"), BinarySequence([0, 1]), BinarySequence.parse("10")}

        assert len(values) == 2

    def test_equal_length_ordering_is_lexicographic(self):
        """HIGH sorts after LOW, first position first."""
        ordered = sorted(BinarySequence.parse(s) for s in ["111", "001", "100", "000"])

        assert [s.encode() for s in ordered] == ["000", "001", "100", "111"]

    def test_shorter_sequences_sort_first(self):
        """Different lengths compare by length before content."""
        assert BinarySequence.parse("11") < BinarySequence.parse("000")
        assert BinarySequence.parse("0000") > BinarySequence.parse("111")
        assert BinarySequence.parse("") < BinarySequence.parse("0")

    def test_comparison_with_other_types(self):
        """Ordering against non-sequences is not supported."""
        with pytest.raises(TypeError):
            BinarySequence.parse("1") < "1"  # noqa: B015

        assert BinarySequence.parse("1") != "1"
