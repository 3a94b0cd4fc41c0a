"""
Edm Value Serialization

Three conversions, all dispatched on the type tag:

- serialize_value: native value -> text for a write-request body
- serialize_query_value: native value -> literal for a query filter
- unserialize_query_value: filter text -> native value

None of them check that the value fits the tag; callers that need that
guard use validate_edm_value first.
"""

from __future__ import annotations

import base64
import html
import logging
import re
from typing import Any, Optional

from .convert import convert_to_datetime, convert_to_edm_datetime, to_boolean
from .model import (
    BINARY_LITERAL_PREFIX,
    BODY_FALSE,
    BODY_TRUE,
    DATETIME_LITERAL_PREFIX,
    GUID_LITERAL_PREFIX,
    INT64_LITERAL_SUFFIX,
    LITERAL_QUOTE,
    QUERY_FALSE,
    QUERY_TRUE,
    EdmType,
    TypeTag,
)
from .validation import InvalidTypeError, resolve_tag

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")
_B64_NOISE_RE = re.compile(r"[^A-Za-z0-9+/]")

# Tags whose body text is just the escaped value. None is the absent tag.
_ESCAPED_BODY_TYPES = frozenset(
    {
        EdmType.BINARY,
        EdmType.DOUBLE,
        EdmType.INT32,
        EdmType.INT64,
        EdmType.GUID,
        EdmType.STRING,
        None,
    }
)


def _escape_markup(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def _quote(text: str) -> str:
    """Single-quote text for a filter, doubling embedded quotes."""
    return LITERAL_QUOTE + text.replace("'", "''") + LITERAL_QUOTE


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode("utf-8")


def _b64decode_lenient(text: str) -> bytes:
    """
    Decode base64 the forgiving way: missing padding is restored and
    characters outside the alphabet, padding included, are dropped.
    """
    data = _B64_NOISE_RE.sub("", text)
    if len(data) % 4 == 1:
        # a lone trailing sextet carries no whole byte
        data = data[:-1]
    return base64.b64decode(data + "=" * (-len(data) % 4))


def _leading_int(text: str) -> int:
    """
    Read the leading integer of text, ignoring what follows.

    "42" -> 42, "3.7" -> 3, "12abc" -> 12, "abc" -> 0.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def serialize_value(edm_type: TypeTag, value: Any) -> str:
    """
    Serialize a value for a write-request body or attribute.

    Args:
        edm_type: The Edm type tag; absent is treated like Edm.String
        value: The native value

    Returns:
        Markup-safe text. Booleans become "1"/"0"; DateTime becomes the
        canonical Edm DateTime text.

    Raises:
        InvalidTypeError: If the tag is not a valid Edm type
    """
    tag = resolve_tag(edm_type)

    if tag in _ESCAPED_BODY_TYPES:
        return _escape_markup(value)
    if tag == EdmType.DATETIME:
        return convert_to_edm_datetime(value)
    if tag == EdmType.BOOLEAN:
        return BODY_TRUE if value else BODY_FALSE

    # resolve_tag admits nothing else; a new member must be handled above.
    raise InvalidTypeError(edm_type)


def serialize_query_value(edm_type: TypeTag, value: Any) -> str:
    """
    Serialize a value as a literal inside a query filter expression.

    Args:
        edm_type: The Edm type tag; absent is treated like Edm.String
        value: The native value

    Returns:
        The literal, e.g. 5L, guid'...', X'dead', datetime'...', 'O''Brien'

    Raises:
        InvalidTypeError: If the tag is not a valid Edm type
    """
    tag = resolve_tag(edm_type)
    if value is None:
        value = ""

    if tag == EdmType.DATETIME:
        edm_date = convert_to_edm_datetime(value) or ""
        return DATETIME_LITERAL_PREFIX + edm_date + LITERAL_QUOTE
    if tag == EdmType.BINARY:
        return BINARY_LITERAL_PREFIX + _to_bytes(value).hex() + LITERAL_QUOTE
    if tag == EdmType.BOOLEAN:
        return QUERY_TRUE if value else QUERY_FALSE
    if tag in (EdmType.DOUBLE, EdmType.INT32):
        return str(value)
    if tag == EdmType.INT64:
        return f"{value}{INT64_LITERAL_SUFFIX}"
    if tag == EdmType.GUID:
        return GUID_LITERAL_PREFIX + str(value) + LITERAL_QUOTE
    if tag in (EdmType.STRING, None):
        return _quote(str(value))

    raise InvalidTypeError(edm_type)


def unserialize_query_value(edm_type: TypeTag, value: Optional[str]) -> Any:
    """
    Convert filter text back into a native value.

    A None value means the caller wants the property removed, so it comes
    back as None whatever the tag, without looking at the tag at all.

    Int64 text is returned as-is so large values keep every digit.
    Double and Int32 are read as integers; any fraction is dropped.

    Raises:
        InvalidTypeError: If the tag is absent or not a valid Edm type
    """
    if value is None:
        return None

    tag = resolve_tag(edm_type)

    if tag in (EdmType.GUID, EdmType.STRING, EdmType.INT64):
        return value
    if tag == EdmType.BINARY:
        return _b64decode_lenient(value)
    if tag == EdmType.DATETIME:
        return convert_to_datetime(value)
    if tag == EdmType.BOOLEAN:
        return to_boolean(value)
    if tag in (EdmType.DOUBLE, EdmType.INT32):
        return _leading_int(value)

    logger.debug("Cannot read filter text without an Edm type")
    raise InvalidTypeError(edm_type)
