"""
Annotation Store - top-level container of annotation groups.

A store has a title, an ordered tag list, and one ordered group list per
channel (see channels.py). Collaborators populate it with add_*_group /
AnnotationGroup.add_entry / tags.append, and it round-trips through
serialize() / AnnotationStore.deserialize().

The store holds no external resources. Reading or writing files is the
caller's job (files.py has helpers).
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .channels import (
    CHANNELS,
    SELECTION_CHANNEL,
    SEQUENCE_CHANNEL,
    STRING_CHANNEL,
    TARGET_CHANNEL,
    Channel,
)
from .config import SerializationOptions
from .errors import AnnotationValidationError
from .groups import AnnotationGroup
from .selection import LineSelection
from .sequences import BinarySequence
from .targets import Target


class AnnotationStore:
    """
    Title, tags and per-channel lists of annotation groups.

    Tags keep insertion order and duplicates. Channels are independent:
    adding a group to one never touches another.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        string_groups: Optional[Iterable[AnnotationGroup[str]]] = None,
        sequence_groups: Optional[Iterable[AnnotationGroup[BinarySequence]]] = None,
        selection_groups: Optional[Iterable[AnnotationGroup[LineSelection]]] = None,
        target_groups: Optional[Iterable[AnnotationGroup[Target]]] = None,
    ):
        """
        Groups passed in are adopted, not copied: each joins its channel
        by reference and is typed to that channel from then on.

        Raises:
            AnnotationValidationError: If tags is a bare string, or a group
                does not fit its channel
        """
        if isinstance(tags, str):
            raise AnnotationValidationError(
                f"tags must be an iterable of strings, not a single string: {tags!r}"
            )
        self.title = title
        self.tags: List[str] = list(tags or [])
        self._groups: Dict[str, List[AnnotationGroup]] = {c.name: [] for c in CHANNELS}

        initial = {
            STRING_CHANNEL.name: string_groups,
            SEQUENCE_CHANNEL.name: sequence_groups,
            SELECTION_CHANNEL.name: selection_groups,
            TARGET_CHANNEL.name: target_groups,
        }
        for channel in CHANNELS:
            for group in initial[channel.name] or []:
                self._adopt(channel, group)

    def _adopt(self, channel: Channel, group: AnnotationGroup) -> None:
        """Validate a ready-made group, type it to its channel and append it as-is."""
        if group.target_type is not None and group.target_type is not channel.target_type:
            raise AnnotationValidationError(
                f"Group of {group.target_type.__name__} targets cannot join "
                f"the {channel.name} channel"
            )
        for entry in group.entries:
            if not isinstance(entry.target, channel.target_type):
                raise AnnotationValidationError(
                    f"The {channel.name} channel holds {channel.target_type.__name__} "
                    f"targets, got {type(entry.target).__name__}"
                )
        group.target_type = channel.target_type
        self._groups[channel.name].append(group)

    # ===== Channel access =====

    def groups(self, channel: Channel = STRING_CHANNEL) -> List[AnnotationGroup]:
        """The live group list of a channel."""
        return self._groups[channel.name]

    def channels(self) -> Iterator[Tuple[Channel, List[AnnotationGroup]]]:
        """(channel, groups) pairs in wire order, including empty channels."""
        for channel in CHANNELS:
            yield channel, self._groups[channel.name]

    @property
    def string_groups(self) -> List[AnnotationGroup[str]]:
        return self._groups[STRING_CHANNEL.name]

    @property
    def sequence_groups(self) -> List[AnnotationGroup[BinarySequence]]:
        return self._groups[SEQUENCE_CHANNEL.name]

    @property
    def selection_groups(self) -> List[AnnotationGroup[LineSelection]]:
        return self._groups[SELECTION_CHANNEL.name]

    @property
    def target_groups(self) -> List[AnnotationGroup[Target]]:
        return self._groups[TARGET_CHANNEL.name]

    # ===== Mutation =====

    def add_group(
        self,
        title: Optional[str] = None,
        comment: Optional[str] = None,
        channel: Channel = STRING_CHANNEL,
    ) -> AnnotationGroup:
        """Append an empty group to a channel (plain strings by default) and return it."""
        group = AnnotationGroup(title=title, comment=comment, target_type=channel.target_type)
        self._groups[channel.name].append(group)
        return group

    def add_string_group(
        self, title: Optional[str] = None, comment: Optional[str] = None
    ) -> AnnotationGroup[str]:
        return self.add_group(title, comment, STRING_CHANNEL)

    def add_sequence_group(
        self, title: Optional[str] = None, comment: Optional[str] = None
    ) -> AnnotationGroup[BinarySequence]:
        return self.add_group(title, comment, SEQUENCE_CHANNEL)

    def add_selection_group(
        self, title: Optional[str] = None, comment: Optional[str] = None
    ) -> AnnotationGroup[LineSelection]:
        return self.add_group(title, comment, SELECTION_CHANNEL)

    def add_target_group(
        self, title: Optional[str] = None, comment: Optional[str] = None
    ) -> AnnotationGroup[Target]:
        return self.add_group(title, comment, TARGET_CHANNEL)

    def get_group(self, title: Optional[str], channel: Channel = STRING_CHANNEL) -> Optional[AnnotationGroup]:
        """First group of `channel` with the given title, or None."""
        for group in self._groups[channel.name]:
            if group.title == title:
                return group
        return None

    # ===== Serialization =====

    def serialize(self, options: Optional[SerializationOptions] = None) -> str:
        """Encode the store as JSON text. See serialization.serialize_store."""
        from .serialization import serialize_store

        return serialize_store(self, options)

    @classmethod
    def deserialize(cls, text: str) -> "AnnotationStore":
        """
        Decode JSON text into a store.

        Raises:
            DocumentShapeError: Text is not JSON or has the wrong shape
            TargetDecodeError: A target string failed its type-specific decode
        """
        from .serialization import deserialize_store

        return deserialize_store(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationStore):
            return NotImplemented
        return (
            self.title == other.title
            and self.tags == other.tags
            and self._groups == other._groups
        )

    __hash__ = None

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.key}={len(g)}" for c, g in self.channels())
        return f"AnnotationStore(title={self.title!r}, tags={self.tags!r}, {counts})"
