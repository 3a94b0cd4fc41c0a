"""Edm type codec - type tags, value validation and wire serialization."""

from .model import (
    DEFAULT_TYPE,
    EXPECTED_SHAPES,
    INVALID_EDM_MSG,
    EdmType,
    NativeShape,
    TypeTag,
    shape_of,
)
from .validation import (
    InvalidTypeError,
    is_valid,
    process_type,
    resolve_tag,
    validate_edm_value,
)
from .serialize import (
    serialize_value,
    serialize_query_value,
    unserialize_query_value,
)
from .convert import (
    EDM_DATETIME_FORMAT,
    convert_to_datetime,
    convert_to_edm_datetime,
    to_boolean,
)
from .property import EdmProperty

__all__ = [
    "DEFAULT_TYPE",
    "EXPECTED_SHAPES",
    "INVALID_EDM_MSG",
    "EdmProperty",
    "EdmType",
    "InvalidTypeError",
    "NativeShape",
    "TypeTag",
    "shape_of",
    # Validation
    "is_valid",
    "process_type",
    "resolve_tag",
    "validate_edm_value",
    # Serialization
    "serialize_value",
    "serialize_query_value",
    "unserialize_query_value",
    # Collaborators
    "EDM_DATETIME_FORMAT",
    "convert_to_datetime",
    "convert_to_edm_datetime",
    "to_boolean",
]
