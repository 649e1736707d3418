"""
Annotating error types.

All errors inherit from AnnotatingError for easy catching.

Two families:
- AnnotationValidationError: an invariant was violated at the call that
  tried to violate it. Never deferred to serialization time.
- AnnotationParseError: raised only from parse/deserialize entry points.
  Carries a location into the document so the failure can be found.
"""

from typing import Optional, Tuple, Union

Location = Tuple[Union[str, int], ...]


def format_location(location: Location) -> str:
    """Render a location tuple as a readable path, e.g. gp[0].e[3].t"""
    parts = []
    for item in location:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts) or "<document>"


class AnnotatingError(Exception):
    """Base exception for all annotating failures."""
    pass


class AnnotationValidationError(AnnotatingError):
    """Raised when a value or container invariant is violated."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LengthMismatchError(AnnotationValidationError):
    """Raised when a selection mask and its base sequence differ in length."""

    def __init__(self, base_length: int, marks_length: int):
        self.base_length = base_length
        self.marks_length = marks_length
        super().__init__(
            f"marks length ({marks_length}) must equal base length ({base_length})"
        )


class LineIndexOutOfRangeError(AnnotationValidationError):
    """Raised when a line index does not exist in its sequence."""

    def __init__(self, index: int, length: int, index_base: int = 0):
        self.index = index
        self.index_base = index_base
        self.length = length
        super().__init__(
            f"line {index} (base: {index_base}) does not exist "
            f"in a sequence of length {length}"
        )


class AnnotationParseError(AnnotatingError):
    """Raised when a document or an encoded value cannot be decoded."""

    def __init__(self, message: str, location: Location = ()):
        self.location = tuple(location)
        self.reason = message
        if self.location:
            message = f"{format_location(self.location)}: {message}"
        super().__init__(message)


class DocumentShapeError(AnnotationParseError):
    """Raised when the text is not JSON or the JSON has the wrong shape."""
    pass


class TargetDecodeError(AnnotationParseError):
    """Raised when an encoded target string fails its type-specific decode."""

    def __init__(
        self,
        value: str,
        type_name: str,
        channel: Optional[str] = None,
        group_index: Optional[int] = None,
        entry_index: Optional[int] = None,
    ):
        self.value = value
        self.type_name = type_name
        self.channel = channel
        self.group_index = group_index
        self.entry_index = entry_index

        location: Location = ()
        if channel is not None and group_index is not None and entry_index is not None:
            location = (channel, group_index, "e", entry_index, "t")
        super().__init__(f"invalid {type_name}: {value!r}", location)


class AnnotationFileError(AnnotatingError):
    """Raised when a store file cannot be read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to access annotation file {path}: {reason}")
