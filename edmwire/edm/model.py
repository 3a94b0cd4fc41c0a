"""
Edm Type Model

The closed world of primitive types exchanged with table storage.

Every property on the wire carries one of eight type tags, or none at
all (read as Edm.String). Any other tag is a request the service will
refuse, so it fails here instead.

Native values are classified into shapes so that "does this value fit
this tag" is a table lookup rather than a chain of isinstance checks.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Union


# ---------- Enums (closed-world) ----------


class EdmType(str, Enum):
    """
    Wire identifiers of the Edm primitive types.

    Members are str subclasses, so EdmType.INT32 == "Edm.Int32".
    """

    DATETIME = "Edm.DateTime"
    BINARY = "Edm.Binary"
    BOOLEAN = "Edm.Boolean"
    DOUBLE = "Edm.Double"
    GUID = "Edm.Guid"
    INT32 = "Edm.Int32"
    INT64 = "Edm.Int64"
    STRING = "Edm.String"

    def __str__(self) -> str:
        return self.value


class NativeShape(str, Enum):
    """
    The shape of a native Python value, independent of any tag.

    TEXT: str
    INTEGER: int (but never bool)
    FLOAT: float
    BOOLEAN: bool
    INSTANT: datetime.datetime
    BYTES: bytes / bytearray
    NULL: None
    OTHER: anything else
    """

    TEXT = "TEXT"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    INSTANT = "INSTANT"
    BYTES = "BYTES"
    NULL = "NULL"
    OTHER = "OTHER"


# A tag as callers hand it to us: a member, its wire string, or absent.
TypeTag = Union[EdmType, str, None]

DEFAULT_TYPE = EdmType.STRING

INVALID_EDM_MSG = "The provided EDM type is invalid."

# ---------- Query literal decoration ----------

DATETIME_LITERAL_PREFIX = "datetime'"
BINARY_LITERAL_PREFIX = "X'"
GUID_LITERAL_PREFIX = "guid'"
LITERAL_QUOTE = "'"
INT64_LITERAL_SUFFIX = "L"

QUERY_TRUE = "true"
QUERY_FALSE = "false"
BODY_TRUE = "1"
BODY_FALSE = "0"


# Expected native shape per tag. Double accepts integers only; see
# validate_edm_value.
EXPECTED_SHAPES: Dict[Optional[EdmType], FrozenSet[NativeShape]] = {
    EdmType.GUID: frozenset({NativeShape.TEXT}),
    EdmType.BINARY: frozenset({NativeShape.TEXT}),
    EdmType.STRING: frozenset({NativeShape.TEXT}),
    EdmType.DOUBLE: frozenset({NativeShape.INTEGER}),
    EdmType.INT32: frozenset({NativeShape.INTEGER}),
    EdmType.INT64: frozenset({NativeShape.INTEGER}),
    EdmType.DATETIME: frozenset({NativeShape.INSTANT}),
    EdmType.BOOLEAN: frozenset({NativeShape.BOOLEAN}),
    None: frozenset({NativeShape.NULL}),
}


def shape_of(value: Any) -> NativeShape:
    """Classify a native value."""
    if value is None:
        return NativeShape.NULL
    # bool is an int subclass: check it first
    if isinstance(value, bool):
        return NativeShape.BOOLEAN
    if isinstance(value, int):
        return NativeShape.INTEGER
    if isinstance(value, float):
        return NativeShape.FLOAT
    if isinstance(value, str):
        return NativeShape.TEXT
    if isinstance(value, datetime):
        return NativeShape.INSTANT
    if isinstance(value, (bytes, bytearray)):
        return NativeShape.BYTES
    return NativeShape.OTHER


