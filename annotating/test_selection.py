"""
Tests for LineSelection

Validates:
- Construction from a mask and from line indices
- Length and range failures are immediate
- Concatenation codec and midpoint split
- Structural ordering, base first
"""

import pytest

from .errors import (
    AnnotationValidationError,
    LengthMismatchError,
    LineIndexOutOfRangeError,
    TargetDecodeError,
)
from .selection import LineSelection
from .sequences import BinarySequence


def seq(text: str) -> BinarySequence:
    return BinarySequence.parse(text)


class TestLineSelectionConstruction:
    """Test building selections."""

    def test_from_mask(self):
        """A same-length mask is accepted as-is."""
        selection = LineSelection(seq("110"), seq("010"))

        assert selection.base == seq("110")
        assert selection.marks == seq("010")

    def test_mask_length_mismatch_fails(self):
        """Different lengths raise LengthMismatchError."""
        with pytest.raises(LengthMismatchError) as exc_info:
            LineSelection(seq("111"), seq("11"))

        assert exc_info.value.base_length == 3
        assert exc_info.value.marks_length == 2

    def test_non_sequence_parts_fail(self):
        """Both parts must be BinarySequence."""
        with pytest.raises(AnnotationValidationError):
            LineSelection("111", seq("000"))  # type: ignore

    def test_from_indices(self, qian):
        """Selected indices become HIGH marks."""
        selection = LineSelection.from_indices(qian, [0, 2])

        assert selection.marks.encode() == "101000"
        assert selection.selected_indices() == [0, 2]

    def test_from_indices_with_index_base(self, qian):
        """index_base is subtracted before the range check."""
        selection = LineSelection.from_indices(qian, [1, 6], index_base=1)

        assert selection.marks.encode() == "100001"
        assert selection.selected_indices(index_base=1) == [1, 6]

    def test_repeated_indices_are_harmless(self, qian):
        """Selecting a line twice is the same as once."""
        once = LineSelection.from_indices(qian, [3])
        twice = LineSelection.from_indices(qian, [3, 3])

        assert once == twice

    def test_no_indices_selects_nothing(self, qian):
        """An empty index list gives an all-LOW mask."""
        selection = LineSelection.from_indices(qian, [])

        assert selection.marks.encode() == "000000"
        assert selection.selected_indices() == []

    @pytest.mark.parametrize("indices,index_base", [([6], 0), ([-1], 0), ([0], 1), ([7], 1)])
    def test_out_of_range_index_fails(self, qian, indices, index_base):
        """Indices outside the sequence raise LineIndexOutOfRangeError."""
        with pytest.raises(LineIndexOutOfRangeError) as exc_info:
            LineSelection.from_indices(qian, indices, index_base=index_base)

        assert exc_info.value.index == indices[0]
        assert exc_info.value.index_base == index_base
        assert exc_info.value.length == 6

    def test_is_selected(self, qian):
        """is_selected is False outside the sequence."""
        selection = LineSelection.from_indices(qian, [4])

        assert selection.is_selected(4)
        assert not selection.is_selected(3)
        assert not selection.is_selected(6)
        assert not selection.is_selected(-1)


class TestLineSelectionCodec:
    """Test encode / try_parse."""

    def test_encode_concatenates_base_and_marks(self, qian):
        """Base first, mask second, no separator."""
        selection = LineSelection.from_indices(qian, [0])

        assert selection.encode() == "111111100000"
        assert str(selection) == "111111100000"

    def test_try_parse_splits_at_midpoint(self):
        """Each half is decoded on its own."""
        selection = LineSelection.try_parse("1110")

        assert selection == LineSelection(seq("11"), seq("10"))

    def test_round_trip(self, kun):
        """decode(encode(x)) == x."""
        selection = LineSelection.from_indices(kun, [1, 2, 5])

        assert LineSelection.try_parse(selection.encode()) == selection

    def test_empty_string_is_empty_selection(self):
        """Two empty halves make an empty selection."""
        selection = LineSelection.try_parse("")

        assert selection == LineSelection(seq(""), seq(""))

    @pytest.mark.parametrize("text", ["1", "111", "11100", "1x10", "11 0", "10a1"])
    def test_try_parse_failures(self, text):
        """Odd length or a bad half yields None."""
        assert LineSelection.try_parse(text) is None

    def test_parse_raises_decode_error(self):
        """parse() raises TargetDecodeError naming the type."""
        with pytest.raises(TargetDecodeError) as exc_info:
            LineSelection.parse("101")

        assert exc_info.value.type_name == "LineSelection"


class TestLineSelectionOrdering:
    """Test equality and ordering."""

    def test_orders_by_base_first(self, qian, kun):
        """Base decides before the mask is looked at."""
        low_base = LineSelection.from_indices(kun, [0, 1, 2, 3, 4, 5])
        high_base = LineSelection.from_indices(qian, [])

        assert low_base < high_base

    def test_orders_by_marks_on_equal_base(self, qian):
        """Equal bases fall back to the mask."""
        first = LineSelection.from_indices(qian, [5])
        second = LineSelection.from_indices(qian, [0])

        assert first < second
        assert sorted([second, first]) == [first, second]

    def test_hashable(self, qian):
        """Equal selections hash equal."""
        assert len({LineSelection.from_indices(qian, [1]), LineSelection.from_indices(qian, [1])}) == 1
