"""
Binary sequences - the atomic annotation target.

A BinarySequence is an immutable, ordered run of two-valued symbols
(a hexagram or trigram figure, for example). Its string form is one
character per symbol: '1' for HIGH, '0' for LOW. No delimiters.

Ordering is total: shorter sequences sort first, equal-length sequences
compare position by position with HIGH > LOW.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import AnnotationValidationError, TargetDecodeError


class Symbol(IntEnum):
    """One position of a binary sequence."""

    LOW = 0
    HIGH = 1

    @property
    def char(self) -> str:
        return "1" if self is Symbol.HIGH else "0"


_CHAR_TO_SYMBOL = {"0": Symbol.LOW, "1": Symbol.HIGH}


def _to_symbol(value: Union[Symbol, int, bool]) -> Symbol:
    if isinstance(value, Symbol):
        return value
    if isinstance(value, (bool, int)) and int(value) in (0, 1):
        return Symbol(int(value))
    raise AnnotationValidationError(
        f"sequence symbols must be Symbol, 0/1 or bool, got {value!r}"
    )


@total_ordering
@dataclass(frozen=True, init=False, repr=False)
class BinarySequence:
    """
    Immutable ordered sequence of LOW/HIGH symbols.

    Length is whatever the caller supplied, including zero.
    """

    symbols: Tuple[Symbol, ...]

    def __init__(self, symbols: Iterable[Union[Symbol, int, bool]] = ()):
        object.__setattr__(self, "symbols", tuple(_to_symbol(s) for s in symbols))

    @classmethod
    def of_length(cls, length: int, symbol: Symbol = Symbol.LOW) -> "BinarySequence":
        """Sequence of `length` copies of one symbol."""
        if length < 0:
            raise AnnotationValidationError(f"length cannot be negative: {length}")
        return cls([symbol] * length)

    # ===== Codec =====

    def encode(self) -> str:
        return "".join(s.char for s in self.symbols)

    @classmethod
    def try_parse(cls, s: str) -> Optional["BinarySequence"]:
        """Decode a '0'/'1' string. Returns None on any other character."""
        if not isinstance(s, str):
            return None
        symbols = []
        for ch in s:
            symbol = _CHAR_TO_SYMBOL.get(ch)
            if symbol is None:
                return None
            symbols.append(symbol)
        return cls(symbols)

    @classmethod
    def parse(cls, s: str) -> "BinarySequence":
        result = cls.try_parse(s)
        if result is None:
            raise TargetDecodeError(s, cls.__name__)
        return result

    # ===== Sequence protocol =====

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def __getitem__(self, index: int) -> Symbol:
        return self.symbols[index]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BinarySequence):
            return NotImplemented
        return (len(self), self.symbols) < (len(other), other.symbols)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"BinarySequence('{self.encode()}')"
