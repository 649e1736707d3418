"""
Serialization configuration.

Options are immutable snapshots passed explicitly to serialize calls.
The only environment input is an optional default indent for the CLI.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import AnnotationValidationError

# Environment variable overrides (CLI only)
ENV_JSON_INDENT = "ANNOTATING_JSON_INDENT"

FILE_ENCODING = "utf-8"


class SerializationOptions(BaseModel):
    """
    How a store is written as JSON text.

    Defaults give the compact form: no whitespace, non-ASCII written as-is.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: Optional[int] = None  # None = compact
    ensure_ascii: bool = False

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: Optional[int]) -> Optional[int]:
        """Indent must be non-negative."""
        if v is not None and v < 0:
            raise ValueError("indent cannot be negative")
        return v


DEFAULT_OPTIONS = SerializationOptions()


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> SerializationOptions:
    """
    Build options from ANNOTATING_JSON_INDENT, if set.

    Raises:
        AnnotationValidationError: If the variable is not a non-negative integer
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(ENV_JSON_INDENT)
    if raw is None or not raw.strip():
        return DEFAULT_OPTIONS

    try:
        indent = int(raw.strip())
    except ValueError:
        raise AnnotationValidationError(
            f"{ENV_JSON_INDENT} must be an integer, got {raw!r}"
        ) from None
    if indent < 0:
        raise AnnotationValidationError(f"{ENV_JSON_INDENT} cannot be negative: {indent}")
    return SerializationOptions(indent=indent)
