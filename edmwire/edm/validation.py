"""
Edm Type Validation

Decides which tags exist and whether a native value fits its tag.

A tag is either one of the eight wire identifiers, or absent. Absent is
legal input; anything else is rejected with InvalidTypeError before any
conversion is attempted.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .model import (
    DEFAULT_TYPE,
    EXPECTED_SHAPES,
    INVALID_EDM_MSG,
    EdmType,
    TypeTag,
    shape_of,
)

logger = logging.getLogger(__name__)

_WIRE_IDS = frozenset(member.value for member in EdmType)


class InvalidTypeError(ValueError):
    """
    Raised when a type tag is outside the closed Edm enumeration.

    Never retried: the same tag will fail the same way every time.
    """

    def __init__(self, edm_type: Any = None, message: str = INVALID_EDM_MSG):
        self.edm_type = edm_type
        super().__init__(message)


def is_valid(edm_type: Any) -> bool:
    """
    True iff edm_type is exactly one of the eight wire identifiers.

    Absent, empty and non-string values are not valid.
    """
    return isinstance(edm_type, str) and edm_type in _WIRE_IDS


def resolve_tag(edm_type: TypeTag) -> Optional[EdmType]:
    """
    Map a caller-supplied tag to its EdmType member.

    Returns None for an absent or empty tag, so callers can apply their
    own default.

    Raises:
        InvalidTypeError: If the tag is present but not one of the eight.
    """
    if edm_type is None or edm_type == "":
        return None
    if not is_valid(edm_type):
        logger.debug("Rejected Edm type tag %r", edm_type)
        raise InvalidTypeError(edm_type)
    return EdmType(edm_type)


def process_type(edm_type: TypeTag) -> EdmType:
    """
    Substitute the default for an absent tag, then validate it.

    Returns:
        The EdmType member; Edm.String when the tag was absent or empty.

    Raises:
        InvalidTypeError: If the tag is not a valid Edm type.
    """
    if not edm_type:
        logger.debug("No Edm type given, defaulting to %s", DEFAULT_TYPE.value)
        edm_type = DEFAULT_TYPE
    if not is_valid(edm_type):
        logger.debug("Rejected Edm type tag %r", edm_type)
        raise InvalidTypeError(edm_type)
    return EdmType(edm_type)


def validate_edm_value(edm_type: TypeTag, value: Any) -> bool:
    """
    Check that a native value has the shape its tag expects.

    Guid, Binary and String expect text; Double, Int32 and Int64 expect
    an integer; DateTime a datetime; Boolean a bool. An absent tag
    expects an absent value.

    Double only accepts integers here, so 1.5 is not a valid Edm.Double.
    This matches how Double text is read back (unserialize_query_value
    truncates it to an integer) and is kept deliberately.

    Raises:
        InvalidTypeError: If the tag is not a valid Edm type.
    """
    tag = resolve_tag(edm_type)
    return shape_of(value) in EXPECTED_SHAPES[tag]
