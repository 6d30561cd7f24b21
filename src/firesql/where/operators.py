"""SQL comparison token to store filter operator mapping."""

from ..constants import FilterOp, SqlOperator
from ..exceptions import UnknownOperatorError, UnsupportedOperatorError

__all__ = ("map_operator",)

_OP_MAP = {
    SqlOperator.EQ: FilterOp.EQ,
    SqlOperator.IS: FilterOp.EQ,
    SqlOperator.LT: FilterOp.LT,
    SqlOperator.LTE: FilterOp.LTE,
    SqlOperator.GT: FilterOp.GT,
    SqlOperator.GTE: FilterOp.GTE,
    SqlOperator.CONTAINS: FilterOp.ARRAY_CONTAINS,
    SqlOperator.CONTAINS_ANY: FilterOp.ARRAY_CONTAINS_ANY,
}

# Negation has no native filter and is not rewritten at this layer
_NEGATED_OPS = frozenset(
    {
        SqlOperator.NOT,
        SqlOperator.NOT_CONTAINS,
        SqlOperator.NOT_IN,
        SqlOperator.NOT_LIKE,
        SqlOperator.NOT_BETWEEN,
    }
)


def map_operator(token: str) -> str:
    """Map a SQL comparison token onto the store's filter operator.

    Raises:
        UnsupportedOperatorError: For NOT and NOT CONTAINS
        UnknownOperatorError: For any token outside the mapping table
    """
    if token in _NEGATED_OPS:
        raise UnsupportedOperatorError(f'"{token}" WHERE operator unsupported', operator=token)
    op = _OP_MAP.get(token)
    if op is None:
        raise UnknownOperatorError("Unknown WHERE operator", operator=token)
    return op
