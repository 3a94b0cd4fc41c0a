"""
Typed property values.

An EdmProperty pairs a resolved type tag with a native value and hands
both to the codec together, so callers cannot serialize a value under a
tag they never validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .model import EdmType, NativeShape, TypeTag, shape_of
from .serialize import serialize_query_value, serialize_value, unserialize_query_value
from .validation import process_type, validate_edm_value


@dataclass(frozen=True)
class EdmProperty:
    """
    A single typed property value.

    The tag is resolved on construction: an absent tag becomes Edm.String
    and an unknown one raises InvalidTypeError. Whether the value has the
    right shape for the tag is a separate question, see is_valid().
    """

    edm_type: EdmType
    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "edm_type", process_type(self.edm_type))

    @staticmethod
    def of(edm_type: TypeTag, value: Any) -> "EdmProperty":
        """Create a property from any accepted tag form."""
        return EdmProperty(edm_type=edm_type, value=value)

    @classmethod
    def from_query_text(cls, edm_type: TypeTag, text: Optional[str]) -> "EdmProperty":
        """Read a property back from filter text; an absent tag means Edm.String."""
        resolved = process_type(edm_type)
        return cls(edm_type=resolved, value=unserialize_query_value(resolved, text))

    @property
    def shape(self) -> NativeShape:
        return shape_of(self.value)

    def is_valid(self) -> bool:
        return validate_edm_value(self.edm_type, self.value)

    def to_body_text(self) -> str:
        return serialize_value(self.edm_type, self.value)

    def to_query_literal(self) -> str:
        return serialize_query_value(self.edm_type, self.value)
