"""
Annotation entries - a (target, content) pair.
"""

from typing import Generic, TypeVar

from .errors import AnnotationValidationError

T = TypeVar("T")


class AnnotationEntry(Generic[T]):
    """
    One annotation: free-form content about a target.

    Both fields are required. Assigning None (or non-string content)
    fails immediately.
    """

    def __init__(self, target: T, content: str):
        self.target = target
        self.content = content

    @property
    def target(self) -> T:
        return self._target

    @target.setter
    def target(self, value: T) -> None:
        if value is None:
            raise AnnotationValidationError("Entry target cannot be None")
        self._target = value

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        if value is None:
            raise AnnotationValidationError("Entry content cannot be None")
        if not isinstance(value, str):
            raise AnnotationValidationError(
                f"Entry content must be a string, got {type(value).__name__}"
            )
        self._content = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationEntry):
            return NotImplemented
        return self._target == other._target and self._content == other._content

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"AnnotationEntry(target={self._target!r}, content={self._content!r})"
