"""
Store files - read and write serialized stores on disk.

The core never touches the filesystem. These helpers are the one place
that does, for callers that keep one store per JSON file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import FILE_ENCODING, SerializationOptions
from .errors import AnnotationFileError
from .serialization import deserialize_store, serialize_store
from .store import AnnotationStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_store(
    store: AnnotationStore,
    path: PathLike,
    options: Optional[SerializationOptions] = None,
) -> Path:
    """
    Serialize a store and write it to `path` (UTF-8).

    Parent directories must already exist.

    Returns:
        The path written

    Raises:
        AnnotationFileError: If the file cannot be written
    """
    path = Path(path)
    text = serialize_store(store, options)
    try:
        path.write_text(text, encoding=FILE_ENCODING)
    except OSError as e:
        raise AnnotationFileError(str(path), str(e)) from e
    logger.debug(f"[FILES] Wrote store {store.title!r} to {path}")
    return path


def read_store_text(path: PathLike) -> str:
    """
    Read the raw JSON text of a store file.

    Raises:
        AnnotationFileError: If the file cannot be read
    """
    path = Path(path)
    try:
        return path.read_text(encoding=FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise AnnotationFileError(str(path), str(e)) from e


def load_store(path: PathLike) -> AnnotationStore:
    """
    Read and deserialize a store file.

    Raises:
        AnnotationFileError: If the file cannot be read
        DocumentShapeError: If the file is not a store document
        TargetDecodeError: If a target string fails to decode
    """
    store = deserialize_store(read_store_text(path))
    logger.debug(f"[FILES] Loaded store {store.title!r} from {path}")
    return store
