"""
Line selections - a sequence plus a same-length mask.

A HIGH symbol at position i of `marks` selects line i of `base`.
String form is encode(base) + encode(marks), so it always has even length
and decoding splits it exactly at the midpoint.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List, Optional

from .errors import (
    AnnotationValidationError,
    LengthMismatchError,
    LineIndexOutOfRangeError,
    TargetDecodeError,
)
from .sequences import BinarySequence, Symbol


@total_ordering
@dataclass(frozen=True)
class LineSelection:
    """
    A BinarySequence with some of its lines selected.

    Ordering and equality are structural on (base, marks), base first.
    """

    base: BinarySequence
    marks: BinarySequence

    def __post_init__(self):
        if not isinstance(self.base, BinarySequence) or not isinstance(self.marks, BinarySequence):
            raise AnnotationValidationError("base and marks must both be BinarySequence")
        if len(self.marks) != len(self.base):
            raise LengthMismatchError(len(self.base), len(self.marks))

    @classmethod
    def from_indices(
        cls,
        base: BinarySequence,
        indices: Iterable[int],
        index_base: int = 0,
    ) -> "LineSelection":
        """
        Select lines of `base` by index.

        `index_base` is subtracted from every index first, so 1-based line
        numbers can be passed with index_base=1. Repeated indices are fine.

        Raises:
            LineIndexOutOfRangeError: If an index falls outside the sequence.
        """
        count = len(base)
        marks = [Symbol.LOW] * count
        for index in indices:
            line = index - index_base
            if line < 0 or line >= count:
                raise LineIndexOutOfRangeError(index, count, index_base)
            marks[line] = Symbol.HIGH
        return cls(base, BinarySequence(marks))

    def selected_indices(self, index_base: int = 0) -> List[int]:
        """Indices of the selected lines, ascending, offset by `index_base`."""
        return [i + index_base for i, s in enumerate(self.marks) if s is Symbol.HIGH]

    def is_selected(self, line: int) -> bool:
        return 0 <= line < len(self.marks) and self.marks[line] is Symbol.HIGH

    # ===== Codec =====

    def encode(self) -> str:
        return f"{self.base.encode()}{self.marks.encode()}"

    @classmethod
    def try_parse(cls, s: str) -> Optional["LineSelection"]:
        """Decode a selection string. Returns None on odd length or bad halves."""
        if not isinstance(s, str) or len(s) % 2 != 0:
            return None
        half = len(s) // 2
        base = BinarySequence.try_parse(s[:half])
        if base is None:
            return None
        marks = BinarySequence.try_parse(s[half:])
        if marks is None:
            return None
        return cls(base, marks)

    @classmethod
    def parse(cls, s: str) -> "LineSelection":
        result = cls.try_parse(s)
        if result is None:
            raise TargetDecodeError(s, cls.__name__)
        return result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LineSelection):
            return NotImplemented
        return (self.base, self.marks) < (other.base, other.marks)

    def __str__(self) -> str:
        return self.encode()
