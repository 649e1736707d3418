"""
Annotation targets - what an annotation is about.

A Target is one of three variants:
- NONE:  no target at all
- WHOLE: a whole BinarySequence
- LINE:  one line (0-based) of a BinarySequence

Wire form is space-joined fields:
    NONE  -> " "
    WHOLE -> "<sequence>"
    LINE  -> "<sequence> <line>"

A LINE whose index is outside the sequence is written as WHOLE. This is
the only lossy step of the encoding. Out-of-range lines are tolerated in
memory and only normalized on the way out.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import AnnotationValidationError, TargetDecodeError
from .sequences import BinarySequence

logger = logging.getLogger(__name__)

NO_TARGET_TEXT = " "

_ASCII_TOKENS = re.compile(r"[^ \t\n\r\x0b\x0c]+")
_LINE_NUMBER = re.compile(r"[0-9]+")


class TargetKind(str, Enum):
    """Variant tag of a Target."""

    NONE = "none"
    WHOLE = "whole"
    LINE = "line"


@dataclass(frozen=True)
class Target:
    """
    Tagged union of NONE / WHOLE(sequence) / LINE(sequence, line).

    Build through Target.none(), Target.whole() and Target.at_line().
    Sequences must be non-empty: a whole empty sequence would encode to
    the same text as NONE.
    """

    kind: TargetKind = TargetKind.NONE
    sequence: Optional[BinarySequence] = None
    line: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.kind, TargetKind):
            raise AnnotationValidationError(f"Invalid target kind: {self.kind!r}")

        if self.kind is TargetKind.NONE:
            if self.sequence is not None or self.line is not None:
                raise AnnotationValidationError("A NONE target carries no sequence or line")
            return

        if not isinstance(self.sequence, BinarySequence):
            raise AnnotationValidationError(
                f"A {self.kind.name} target requires a BinarySequence, got {self.sequence!r}"
            )
        if len(self.sequence) == 0:
            raise AnnotationValidationError("Target sequence cannot be empty")

        if self.kind is TargetKind.WHOLE:
            if self.line is not None:
                raise AnnotationValidationError("A WHOLE target carries no line")
        elif isinstance(self.line, bool) or not isinstance(self.line, int):
            raise AnnotationValidationError(
                f"A LINE target requires an integer line, got {self.line!r}"
            )

    @classmethod
    def none(cls) -> "Target":
        return cls()

    @classmethod
    def whole(cls, sequence: BinarySequence) -> "Target":
        return cls(TargetKind.WHOLE, sequence)

    @classmethod
    def at_line(cls, sequence: BinarySequence, line: int) -> "Target":
        """
        Target one line of a sequence.

        The line is not range-checked here. Use AnnotationGroup.add_line_entry
        for an eager check.
        """
        return cls(TargetKind.LINE, sequence, line)

    @property
    def line_in_range(self) -> bool:
        """True for LINE targets whose line exists in the sequence."""
        return (
            self.kind is TargetKind.LINE
            and self.sequence is not None
            and self.line is not None
            and 0 <= self.line < len(self.sequence)
        )

    def normalized(self) -> "Target":
        """The target as it reads back after an encode/decode round trip."""
        if self.kind is TargetKind.LINE and not self.line_in_range:
            return Target.whole(self.sequence)
        return self

    # ===== Codec =====

    def encode(self) -> str:
        if self.kind is TargetKind.NONE:
            return NO_TARGET_TEXT
        if self.kind is TargetKind.WHOLE:
            return self.sequence.encode()
        if not self.line_in_range:
            logger.debug(
                f"[TARGET] Line {self.line} outside sequence {self.sequence}, writing whole sequence"
            )
            return self.sequence.encode()
        return f"{self.sequence.encode()} {self.line}"

    @classmethod
    def try_parse(cls, s: str) -> Optional["Target"]:
        """Decode a target string by token count. Returns None on failure."""
        if not isinstance(s, str):
            return None
        tokens = _ASCII_TOKENS.findall(s)

        if len(tokens) == 0:
            return cls.none()

        if len(tokens) > 2:
            return None

        sequence = BinarySequence.try_parse(tokens[0])
        if sequence is None or len(sequence) == 0:
            return None

        if len(tokens) == 1:
            return cls.whole(sequence)

        if not _LINE_NUMBER.fullmatch(tokens[1]):
            return None
        return cls.at_line(sequence, int(tokens[1]))

    @classmethod
    def parse(cls, s: str) -> "Target":
        result = cls.try_parse(s)
        if result is None:
            raise TargetDecodeError(s, cls.__name__)
        return result

    def __str__(self) -> str:
        return self.encode()
