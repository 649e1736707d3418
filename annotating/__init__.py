"""
Annotating - typed annotation stores with a compact JSON encoding.

A store holds free-form text annotations about structured targets:
binary sequences (hexagram/trigram figures), line selections within
them, plain string labels, or a tagged Target (nothing / whole / line).

Usage:
    from annotating import AnnotationStore, BinarySequence

    store = AnnotationStore(title="Sample Store")
    store.tags.append("QianKun")

    names = store.add_sequence_group("Names", "Names of the Guas")
    names.add_entry(BinarySequence.parse("111"), "Qian")
    names.add_entry(BinarySequence.parse("000"), "Kun")

    text = store.serialize()
    assert AnnotationStore.deserialize(text) == store
"""

from .channels import (
    CHANNELS,
    SELECTION_CHANNEL,
    SEQUENCE_CHANNEL,
    STRING_CHANNEL,
    TARGET_CHANNEL,
    Channel,
    TargetCodec,
    get_channel,
)
from .config import DEFAULT_OPTIONS, SerializationOptions
from .entries import AnnotationEntry
from .errors import (
    AnnotatingError,
    AnnotationFileError,
    AnnotationParseError,
    AnnotationValidationError,
    DocumentShapeError,
    LengthMismatchError,
    LineIndexOutOfRangeError,
    TargetDecodeError,
)
from .files import load_store, save_store
from .groups import AnnotationGroup
from .selection import LineSelection
from .sequences import BinarySequence, Symbol
from .serialization import deserialize_store, serialize_store
from .store import AnnotationStore
from .targets import Target, TargetKind

__all__ = [
    # Errors
    "AnnotatingError",
    "AnnotationValidationError",
    "LengthMismatchError",
    "LineIndexOutOfRangeError",
    "AnnotationParseError",
    "DocumentShapeError",
    "TargetDecodeError",
    "AnnotationFileError",
    # Target values
    "Symbol",
    "BinarySequence",
    "LineSelection",
    "Target",
    "TargetKind",
    # Containers
    "AnnotationEntry",
    "AnnotationGroup",
    "AnnotationStore",
    # Channels
    "Channel",
    "TargetCodec",
    "CHANNELS",
    "STRING_CHANNEL",
    "SEQUENCE_CHANNEL",
    "SELECTION_CHANNEL",
    "TARGET_CHANNEL",
    "get_channel",
    # Serialization
    "SerializationOptions",
    "DEFAULT_OPTIONS",
    "serialize_store",
    "deserialize_store",
    "save_store",
    "load_store",
]
