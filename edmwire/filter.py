"""
Query filter composition.

Builds $filter expressions out of small nodes and renders them to text.
Constants go through serialize_query_value, so every typed literal in a
filter is spelled exactly as the codec spells it.

Usage:
    expr = apply_and(
        apply_eq(apply_property_name("PartitionKey"), apply_constant("users")),
        apply_gt(apply_property_name("Age"), apply_constant(30, EdmType.INT32)),
    )
    build_filter_expression(expr)
    # "((PartitionKey eq 'users') and (Age gt 30))"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from edmwire.edm.model import EdmType, TypeTag
from edmwire.edm.serialize import serialize_query_value
from edmwire.edm.validation import process_type


class FilterError(ValueError):
    """Raised when a filter tree contains a node that cannot be rendered."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Unsupported filter node: {type(node).__name__}")


# ---------- Nodes ----------


@dataclass(frozen=True)
class PropertyNameFilter:
    """A property name, rendered bare."""

    name: str


@dataclass(frozen=True)
class ConstantFilter:
    """A typed constant, rendered as a query literal."""

    edm_type: EdmType
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "edm_type", process_type(self.edm_type))


@dataclass(frozen=True)
class QueryStringFilter:
    """Raw filter text, passed through untouched."""

    query_string: str


@dataclass(frozen=True)
class UnaryFilter:
    operator: str
    operand: "Filter"


@dataclass(frozen=True)
class BinaryFilter:
    left: "Filter"
    operator: str
    right: "Filter"


Filter = Union[
    PropertyNameFilter,
    ConstantFilter,
    QueryStringFilter,
    UnaryFilter,
    BinaryFilter,
]


# ---------- Combinators ----------


def apply_and(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "and", right)


def apply_or(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "or", right)


def apply_not(operand: Filter) -> UnaryFilter:
    return UnaryFilter("not", operand)


def apply_eq(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "eq", right)


def apply_ne(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "ne", right)


def apply_ge(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "ge", right)


def apply_gt(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "gt", right)


def apply_lt(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "lt", right)


def apply_le(left: Filter, right: Filter) -> BinaryFilter:
    return BinaryFilter(left, "le", right)


def apply_property_name(name: str) -> PropertyNameFilter:
    return PropertyNameFilter(name)


def apply_constant(value: Any, edm_type: TypeTag = None) -> ConstantFilter:
    """A typed constant; an absent tag means Edm.String."""
    return ConstantFilter(edm_type=edm_type, value=value)


def apply_query_string(query_string: str) -> QueryStringFilter:
    return QueryStringFilter(query_string)


# ---------- Rendering ----------


def build_filter_expression(node: Filter) -> str:
    """
    Render a filter tree to $filter text.

    Binary nodes are always parenthesized, so operator precedence in the
    output never depends on the service's parser.

    Raises:
        FilterError: If the tree contains an unknown node type
    """
    if isinstance(node, PropertyNameFilter):
        return node.name
    if isinstance(node, ConstantFilter):
        return serialize_query_value(node.edm_type, node.value)
    if isinstance(node, QueryStringFilter):
        return node.query_string
    if isinstance(node, UnaryFilter):
        return f"{node.operator} {build_filter_expression(node.operand)}"
    if isinstance(node, BinaryFilter):
        left = build_filter_expression(node.left)
        right = build_filter_expression(node.right)
        return f"({left} {node.operator} {right})"
    raise FilterError(node)
