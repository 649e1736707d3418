"""
Wire schema - the JSON shape of a serialized store.

Short keys are a frozen contract for this schema revision. They are never
renamed: stores written earlier must stay readable.

    store:  n = title, t = tags, g / gp / gl / ga = channel group lists
    group:  t = title, e = entries, c = comment
    entry:  t = encoded target, c = content

Targets are plain strings here. Decoding them into typed values is done
per channel in serialization.py.

Only the short keys are read. Field names (title, entries, ...) are
unknown keys like any other: ignored. Missing optional keys take their
defaults. Documents are built from short-key dicts as well.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .channels import SELECTION_CHANNEL, SEQUENCE_CHANNEL, STRING_CHANNEL, TARGET_CHANNEL

# Store keys
TITLE_KEY = "n"
TAGS_KEY = "t"

# Group keys
GROUP_TITLE_KEY = "t"
ENTRIES_KEY = "e"
COMMENT_KEY = "c"

# Entry keys
TARGET_KEY = "t"
CONTENT_KEY = "c"


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class EntryDocument(_WireModel):
    """One entry as stored: both fields required."""

    target: str = Field(alias=TARGET_KEY)
    content: str = Field(alias=CONTENT_KEY)


class GroupDocument(_WireModel):
    """One group as stored. Comment is omitted from output when absent."""

    title: Optional[str] = Field(default=None, alias=GROUP_TITLE_KEY)
    entries: List[EntryDocument] = Field(default_factory=list, alias=ENTRIES_KEY)
    comment: Optional[str] = Field(default=None, alias=COMMENT_KEY)


class StoreDocument(_WireModel):
    """
    A whole store as stored.

    Field order is output order. Channel lists are None (and omitted)
    when the channel has no groups.
    """

    title: Optional[str] = Field(default=None, alias=TITLE_KEY)
    tags: List[str] = Field(default_factory=list, alias=TAGS_KEY)
    string_groups: Optional[List[GroupDocument]] = Field(default=None, alias=STRING_CHANNEL.key)
    sequence_groups: Optional[List[GroupDocument]] = Field(default=None, alias=SEQUENCE_CHANNEL.key)
    selection_groups: Optional[List[GroupDocument]] = Field(default=None, alias=SELECTION_CHANNEL.key)
    target_groups: Optional[List[GroupDocument]] = Field(default=None, alias=TARGET_CHANNEL.key)
