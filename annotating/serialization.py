"""
Store serialization - AnnotationStore <-> compact JSON text.

Rules:
------
- Output key order is fixed (schema.py).
- A channel key is written only when the channel has groups.
- Absent titles and comments are omitted, never written as null.
- Line targets outside their sequence are written as whole-sequence targets.
- Deserialization fails the whole document on the first problem, with a
  location pointing at the offending field.

Round trip: deserialize(serialize(store)) == store for every store built
through the public operations, apart from the demotion above.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .channels import CHANNELS, Channel
from .config import DEFAULT_OPTIONS, SerializationOptions
from .entries import AnnotationEntry
from .errors import (
    AnnotationValidationError,
    DocumentShapeError,
    TargetDecodeError,
    format_location,
)
from .groups import AnnotationGroup
from .schema import (
    COMMENT_KEY,
    CONTENT_KEY,
    ENTRIES_KEY,
    GROUP_TITLE_KEY,
    TAGS_KEY,
    TARGET_KEY,
    TITLE_KEY,
    EntryDocument,
    GroupDocument,
    StoreDocument,
)
from .store import AnnotationStore

logger = logging.getLogger(__name__)


def _field_name(channel: Channel) -> str:
    return f"{channel.name}_groups"


def _group_to_document(channel: Channel, group: AnnotationGroup) -> GroupDocument:
    entries = [
        EntryDocument.model_validate(
            {TARGET_KEY: channel.codec.encode(entry.target), CONTENT_KEY: entry.content}
        )
        for entry in group.entries
    ]
    return GroupDocument.model_validate(
        {GROUP_TITLE_KEY: group.title, ENTRIES_KEY: entries, COMMENT_KEY: group.comment}
    )


def store_to_document(store: AnnotationStore) -> StoreDocument:
    """
    Build the wire model of a store. Empty channels map to None.

    Raises:
        AnnotationValidationError: If a title, tag, comment or target does
            not fit the schema (e.g. a non-string tag appended directly)
    """
    data: Dict[str, Any] = {TITLE_KEY: store.title, TAGS_KEY: list(store.tags)}
    try:
        for channel, groups in store.channels():
            data[channel.key] = (
                [_group_to_document(channel, g) for g in groups] if groups else None
            )
        return StoreDocument.model_validate(data)
    except ValidationError as e:
        location = format_location(_first_error_location(e))
        raise AnnotationValidationError(
            f"Store cannot be serialized ({location}): {_first_error_message(e)}"
        ) from e


def serialize_store(
    store: AnnotationStore, options: Optional[SerializationOptions] = None
) -> str:
    """
    Encode a store as JSON text.

    Args:
        store: Store to encode
        options: Formatting options (default: compact, non-ASCII as-is)

    Returns:
        JSON text, e.g. {"n":"Sample Store","t":["Tag1"],"g":[...]}

    Raises:
        AnnotationValidationError: If an entry target has the wrong type
            for its channel
    """
    options = options or DEFAULT_OPTIONS
    document = store_to_document(store)
    data: Dict[str, Any] = document.model_dump(by_alias=True, exclude_none=True)

    separators = (",", ":") if options.indent is None else (",", ": ")
    text = json.dumps(
        data,
        ensure_ascii=options.ensure_ascii,
        indent=options.indent,
        separators=separators,
    )
    logger.debug(
        f"[SERIALIZE] Store {store.title!r}: "
        f"{sum(len(g) for _, g in store.channels())} groups, {len(text)} chars"
    )
    return text


def _first_error_location(error: ValidationError) -> tuple:
    details = error.errors()
    if not details:
        return ()
    return tuple(details[0].get("loc", ()))


def _first_error_message(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    if first.get("type") == "json_invalid":
        return f"invalid JSON: {first.get('ctx', {}).get('error', first.get('msg'))}"
    return first.get("msg", str(error))


def document_from_text(text: str) -> StoreDocument:
    """
    Parse JSON text into the wire model.

    Raises:
        DocumentShapeError: If the text is not JSON or has the wrong shape
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise DocumentShapeError(f"expected JSON text, got {type(text).__name__}")
    try:
        return StoreDocument.model_validate_json(text)
    except ValidationError as e:
        raise DocumentShapeError(_first_error_message(e), _first_error_location(e)) from e


def _group_from_document(
    channel: Channel, group_index: int, document: GroupDocument
) -> AnnotationGroup:
    entries = []
    for entry_index, entry_document in enumerate(document.entries):
        target = channel.codec.try_decode(entry_document.target)
        if target is None:
            raise TargetDecodeError(
                entry_document.target,
                channel.codec.type_name,
                channel=channel.key,
                group_index=group_index,
                entry_index=entry_index,
            )
        entries.append(AnnotationEntry(target, entry_document.content))
    return AnnotationGroup(
        title=document.title,
        comment=document.comment,
        entries=entries,
        target_type=channel.target_type,
    )


def store_from_document(document: StoreDocument) -> AnnotationStore:
    """
    Decode typed targets of a wire model into a store.

    Raises:
        TargetDecodeError: If a target string fails its channel's decode
    """
    channel_groups: Dict[str, List[AnnotationGroup]] = {}
    for channel in CHANNELS:
        group_documents = getattr(document, _field_name(channel)) or []
        channel_groups[_field_name(channel)] = [
            _group_from_document(channel, i, g) for i, g in enumerate(group_documents)
        ]
    return AnnotationStore(title=document.title, tags=document.tags, **channel_groups)


def deserialize_store(text: str) -> AnnotationStore:
    """
    Decode JSON text into a store.

    Unknown keys are ignored. Missing optional keys take their defaults.

    Raises:
        DocumentShapeError: Not JSON, or JSON of the wrong shape
        TargetDecodeError: A target string failed its type-specific decode
    """
    document = document_from_text(text)
    store = store_from_document(document)
    logger.debug(
        f"[DESERIALIZE] Store {store.title!r}: "
        f"{sum(len(g) for _, g in store.channels())} groups"
    )
    return store
