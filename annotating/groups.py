"""
Annotation groups - named, ordered lists of entries of one target type.
"""

from typing import Generic, Iterator, List, Optional, Type, TypeVar

from .entries import AnnotationEntry
from .errors import AnnotationValidationError, LineIndexOutOfRangeError
from .sequences import BinarySequence
from .targets import Target

T = TypeVar("T")


class AnnotationGroup(Generic[T]):
    """
    An ordered collection of entries sharing one target type.

    Entries are kept in insertion order and never reordered or removed by
    the group. Several entries may share a target; lookups return the first.

    Groups are expected to be small (one entry per position of the domain),
    so lookups are linear scans.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        comment: Optional[str] = None,
        entries: Optional[List[AnnotationEntry[T]]] = None,
        target_type: Optional[Type[T]] = None,
    ):
        """
        Args:
            title: Optional group title
            comment: Optional free-text comment
            entries: Initial entries, copied in order
            target_type: When set, every added target must be an instance of it
        """
        self.title = title
        self.comment = comment
        self.target_type = target_type
        self.entries: List[AnnotationEntry[T]] = []
        for entry in entries or []:
            self._check_target(entry.target)
            self.entries.append(entry)

    def _check_target(self, target: T) -> None:
        if target is None:
            raise AnnotationValidationError("Entry target cannot be None")
        if self.target_type is not None and not isinstance(target, self.target_type):
            raise AnnotationValidationError(
                f"Group expects {self.target_type.__name__} targets, "
                f"got {type(target).__name__}"
            )

    def add_entry(self, target: T, content: str) -> AnnotationEntry[T]:
        """
        Append a new entry and return it.

        Raises:
            AnnotationValidationError: If target or content is missing,
                or the target has the wrong type for this group
        """
        self._check_target(target)
        entry = AnnotationEntry(target, content)
        self.entries.append(entry)
        return entry

    def get_entry(self, target: T) -> Optional[AnnotationEntry[T]]:
        """First entry whose target equals `target`, or None."""
        for entry in self.entries:
            if entry.target == target:
                return entry
        return None

    def get_entries(self, target: T) -> List[AnnotationEntry[T]]:
        """All entries whose target equals `target`, in list order."""
        return [entry for entry in self.entries if entry.target == target]

    # ===== Target-union helpers =====

    def add_whole_entry(self, sequence: BinarySequence, content: str) -> AnnotationEntry[Target]:
        """Annotate a whole sequence (Target-typed groups only)."""
        return self.add_entry(Target.whole(sequence), content)

    def add_line_entry(
        self, sequence: BinarySequence, line: int, content: str
    ) -> AnnotationEntry[Target]:
        """
        Annotate one line of a sequence (Target-typed groups only).

        Unlike Target.at_line, the line is range-checked here.

        Raises:
            LineIndexOutOfRangeError: If line is outside the sequence
        """
        if not isinstance(sequence, BinarySequence):
            raise AnnotationValidationError(
                f"Expected a BinarySequence, got {type(sequence).__name__}"
            )
        if isinstance(line, bool) or not isinstance(line, int):
            raise AnnotationValidationError(f"Expected an integer line, got {line!r}")
        if line < 0 or line >= len(sequence):
            raise LineIndexOutOfRangeError(line, len(sequence))
        return self.add_entry(Target.at_line(sequence, line), content)

    def add_untargeted_entry(self, content: str) -> AnnotationEntry[Target]:
        """Annotate nothing in particular (Target-typed groups only)."""
        return self.add_entry(Target.none(), content)

    def __iter__(self) -> Iterator[AnnotationEntry[T]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationGroup):
            return NotImplemented
        return (
            self.title == other.title
            and self.comment == other.comment
            and self.entries == other.entries
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"AnnotationGroup(title={self.title!r}, comment={self.comment!r}, "
            f"entries={len(self.entries)})"
        )
