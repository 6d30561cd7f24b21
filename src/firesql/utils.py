"""Utility functions for firesql.

Shared helpers used by the WHERE translator.
"""

import sys
from typing import Any, Optional, Type

from .ast import BoolValue, ExpressionNode, ExprList, NullValue, NumberValue, StringValue
from .exceptions import ShapeError, TranslationError

_MAX_CODE_POINT = sys.maxunicode
_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF


def assert_that(condition: Any, message: str, error: Type[TranslationError] = ShapeError, **details: Any) -> None:
    """Raise `error(message)` when `condition` is falsy."""
    if not condition:
        raise error(message, **details)


def prefix_successor(prefix: str) -> Optional[str]:
    """Return the smallest string greater than every string starting with `prefix`.

    Trailing maximal code points are dropped and the last remaining code point
    is incremented (skipping the surrogate block, which cannot be stored).
    Ordering is by code point, which matches UTF-8 byte ordering.

    Returns None when no such string exists, i.e. `prefix` is empty or made only
    of maximal code points. In that case every string `>= prefix` already starts
    with `prefix`.

    Examples:
        prefix_successor("Jo") -> "Jp"
        prefix_successor("a\\U0010ffff") -> "b"
    """
    limit = prefix.rstrip(chr(_MAX_CODE_POINT))
    if not limit:
        return None
    code = ord(limit[-1]) + 1
    if _SURROGATE_FIRST <= code <= _SURROGATE_LAST:
        code = _SURROGATE_LAST + 1
    return limit[:-1] + chr(code)


def ast_value_to_native(value: Any) -> Any:
    """Convert a literal value node into the store's native scalar.

    Expression lists become Python lists (the operand of CONTAINS-ANY).
    Plain Python scalars are passed through unchanged.

    Raises:
        ShapeError: If `value` is a node that is not a string, number, bool or null literal
    """
    if isinstance(value, NullValue):
        return None
    if isinstance(value, (StringValue, NumberValue, BoolValue)):
        return value.value
    if isinstance(value, ExprList):
        return [ast_value_to_native(v) for v in value.value]
    if isinstance(value, ExpressionNode):
        raise ShapeError("Only literal values are supported in WHERE clause.", node_type=getattr(value, "type", None))
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise ShapeError("Unsupported value in WHERE clause.", value_type=type(value).__name__)
