"""Immutable expression nodes for parsed WHERE clauses.

The SQL grammar emits plain dicts tagged with a ``type`` key
(``binary_expr``, ``column_ref``, ``expr_list``, ``string``, ``number``,
``bool``, ``null``). `parse_where` validates such a tree into the frozen
pydantic models below; the translator only ever sees these models.

Node types the translator has no rule for are preserved as `UnknownNode`
instead of failing validation, so the rejection happens at translation
time with a precise message.

Typical usage:

- From the parser: ``parse_where({"type": "column_ref", "column": "active"})``
- Built by hand: ``binary("=", column("city"), literal("Paris"))``
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter, ValidationError, field_validator

from .exceptions import InvalidExpressionError

__all__ = (
    "ExpressionNode",
    "StringValue",
    "NumberValue",
    "BoolValue",
    "NullValue",
    "ColumnRef",
    "ExprList",
    "BinaryExpr",
    "UnknownNode",
    "Node",
    "VALUE_TYPES",
    "parse_where",
    "column",
    "literal",
    "expr_list",
    "binary",
)


class ExpressionNode(BaseModel):
    model_config = ConfigDict(frozen=True)


class StringValue(ExpressionNode):
    type: Literal["string"] = "string"
    value: str


class NumberValue(ExpressionNode):
    type: Literal["number"] = "number"
    value: Union[int, float]

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_numeric_text(cls, v: Any) -> Any:
        # Some grammars keep the literal's source text, e.g. "3" or "2.5".
        if isinstance(v, str):
            text = v.strip()
            try:
                return int(text)
            except ValueError:
                return float(text)
        return v


class BoolValue(ExpressionNode):
    type: Literal["bool"] = "bool"
    value: bool


class NullValue(ExpressionNode):
    type: Literal["null"] = "null"
    value: None = None


class ColumnRef(ExpressionNode):
    type: Literal["column_ref"] = "column_ref"
    column: str
    table: Optional[str] = None


class ExprList(ExpressionNode):
    type: Literal["expr_list"] = "expr_list"
    value: Tuple["Node", ...] = ()


class BinaryExpr(ExpressionNode):
    type: Literal["binary_expr"] = "binary_expr"
    operator: str
    left: "Node"
    right: "Node"

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, v: Any) -> Any:
        if isinstance(v, str):
            return " ".join(v.upper().split())
        return v


class UnknownNode(ExpressionNode):
    """Any node shape without a translation rule (functions, sub-selects, ...)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str


VALUE_TYPES = frozenset({"string", "number", "bool", "null"})

_KNOWN_TYPES = VALUE_TYPES | {"column_ref", "expr_list", "binary_expr"}


def _node_tag(v: Any) -> str:
    node_type = v.get("type") if isinstance(v, dict) else getattr(v, "type", None)
    return node_type if node_type in _KNOWN_TYPES else "unknown"


Node = Annotated[
    Union[
        Annotated[BinaryExpr, Tag("binary_expr")],
        Annotated[ColumnRef, Tag("column_ref")],
        Annotated[ExprList, Tag("expr_list")],
        Annotated[StringValue, Tag("string")],
        Annotated[NumberValue, Tag("number")],
        Annotated[BoolValue, Tag("bool")],
        Annotated[NullValue, Tag("null")],
        Annotated[UnknownNode, Tag("unknown")],
    ],
    Discriminator(_node_tag),
]

ExprList.model_rebuild()
BinaryExpr.model_rebuild()

_node_adapter: TypeAdapter = TypeAdapter(Node)


def parse_where(where: Union[ExpressionNode, Dict[str, Any]]) -> Any:
    """Normalize a parser dict (or an existing node) into an expression node.

    Args:
        where: Node model or raw dict as emitted by the SQL grammar

    Returns:
        The validated, immutable node

    Raises:
        InvalidExpressionError: If the dict does not describe a valid node tree
        TypeError: If input is neither a node nor a dict
    """
    if isinstance(where, ExpressionNode):
        return where
    if not isinstance(where, dict):
        raise TypeError(f"where must be an expression node or dict, got {type(where).__name__}")
    try:
        return _node_adapter.validate_python(where)
    except ValidationError as e:
        raise InvalidExpressionError(
            "Invalid WHERE expression", errors=[err["msg"] for err in e.errors()]
        ) from e


# -------------------
# Builders
# -------------------


def column(name: str) -> ColumnRef:
    return ColumnRef(column=name)


def literal(value: Any) -> Union[StringValue, NumberValue, BoolValue, NullValue]:
    """Wrap a Python scalar in the matching value node."""
    if value is None:
        return NullValue()
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return BoolValue(value=value)
    if isinstance(value, (int, float)):
        return NumberValue(value=value)
    if isinstance(value, str):
        return StringValue(value=value)
    raise TypeError(f"Unsupported literal type: {type(value).__name__}")


def expr_list(*values: Any) -> ExprList:
    return ExprList(value=tuple(v if isinstance(v, ExpressionNode) else literal(v) for v in values))


def binary(operator: str, left: Any, right: Any) -> BinaryExpr:
    """Build a binary expression; plain Python scalars on the right become literals."""
    if not isinstance(right, ExpressionNode):
        right = literal(right)
    return BinaryExpr(operator=operator, left=left, right=right)
