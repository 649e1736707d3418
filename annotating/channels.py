"""
Channels - one parallel group list per target type.

A channel binds a target type to its wire key and its string codec.
The store keeps one ordered list of groups per channel; channels never
affect each other.

Channels and keys (frozen for this schema revision):
    g   plain string targets
    gp  BinarySequence targets
    gl  LineSelection targets
    ga  Target (none / whole / line) targets
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, Type, TypeVar

from .errors import AnnotationValidationError
from .selection import LineSelection
from .sequences import BinarySequence
from .targets import Target

T = TypeVar("T")


@dataclass(frozen=True)
class TargetCodec(Generic[T]):
    """String codec for one target type."""

    target_type: Type[T]
    encode_fn: Callable[[T], str]
    decode_fn: Callable[[str], Optional[T]]

    @property
    def type_name(self) -> str:
        return self.target_type.__name__

    def encode(self, target: T) -> str:
        if not isinstance(target, self.target_type):
            raise AnnotationValidationError(
                f"Cannot encode {type(target).__name__} as {self.type_name}"
            )
        return self.encode_fn(target)

    def try_decode(self, text: str) -> Optional[T]:
        """Decoded target, or None when `text` is not a valid encoding."""
        return self.decode_fn(text)


@dataclass(frozen=True)
class Channel(Generic[T]):
    """A named group list of the store and the codec of its targets."""

    name: str
    key: str
    codec: TargetCodec[T]

    @property
    def target_type(self) -> Type[T]:
        return self.codec.target_type


STRING_CODEC: TargetCodec[str] = TargetCodec(str, lambda s: s, lambda s: s)
SEQUENCE_CODEC: TargetCodec[BinarySequence] = TargetCodec(
    BinarySequence, BinarySequence.encode, BinarySequence.try_parse
)
SELECTION_CODEC: TargetCodec[LineSelection] = TargetCodec(
    LineSelection, LineSelection.encode, LineSelection.try_parse
)
TARGET_CODEC: TargetCodec[Target] = TargetCodec(Target, Target.encode, Target.try_parse)

STRING_CHANNEL = Channel("string", "g", STRING_CODEC)
SEQUENCE_CHANNEL = Channel("sequence", "gp", SEQUENCE_CODEC)
SELECTION_CHANNEL = Channel("selection", "gl", SELECTION_CODEC)
TARGET_CHANNEL = Channel("target", "ga", TARGET_CODEC)

# Wire order
CHANNELS: Tuple[Channel, ...] = (
    STRING_CHANNEL,
    SEQUENCE_CHANNEL,
    SELECTION_CHANNEL,
    TARGET_CHANNEL,
)


def get_channel(name_or_key: str) -> Channel:
    """
    Look up a channel by name ("sequence") or wire key ("gp").

    Raises:
        AnnotationValidationError: If no channel matches
    """
    for channel in CHANNELS:
        if name_or_key in (channel.name, channel.key):
            return channel
    valid = ", ".join(f"{c.name}/{c.key}" for c in CHANNELS)
    raise AnnotationValidationError(f"Unknown channel: {name_or_key}. Must be one of {valid}.")
