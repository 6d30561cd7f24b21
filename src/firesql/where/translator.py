"""WHERE expression translator.

Compiles a WHERE expression tree into a list of independent store queries
whose union is equivalent to the expression. The store only offers
single-field equality, range and array-membership filters combined with
AND inside one query, so:

- AND refines every query in place (sequential conjunction).
- OR, IN and non-boolean not-equal fan out into separate queries.
- LIKE 'prefix%' becomes a half-open range on the column.
- BETWEEN becomes a closed range on the column.

Queries are never mutated; every step derives new ones, so sibling branches
of a fan-out never share state.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from firesql.settings import settings

from ..ast import (
    VALUE_TYPES,
    BinaryExpr,
    BoolValue,
    ColumnRef,
    ExprList,
    ExpressionNode,
    StringValue,
    parse_where,
)
from ..constants import NOT_EQUAL_OPERATORS, SqlOperator
from ..exceptions import UnsupportedConstructError, UnsupportedLikeError
from ..logger import get_logger
from ..query import FilterQuery, Query, QuerySet
from ..utils import assert_that, ast_value_to_native, prefix_successor
from .like import decompose_like
from .operators import map_operator

__all__ = (
    "WhereTranslator",
    "where_translator",
    "translate_where",
)


class WhereTranslator:
    """Translate WHERE expression nodes into sets of store queries.

    The translator holds no per-call state; one instance can serve any number
    of translations, including concurrent ones.
    """

    def __init__(self, warn_multiple_range_fields: Optional[bool] = None) -> None:
        """Initialize the translator.

        Args:
            warn_multiple_range_fields: Log a warning when a resulting query has range
                filters on more than one field (default from settings)
        """
        if warn_multiple_range_fields is None:
            warn_multiple_range_fields = settings.WARN_MULTIPLE_RANGE_FIELDS
        self.warn_multiple_range_fields = warn_multiple_range_fields
        self.logger = get_logger(__name__)

    def translate(self, queries: Sequence[Query], where: Union[ExpressionNode, Dict[str, Any]]) -> QuerySet:
        """Apply a WHERE expression to a set of queries.

        Args:
            queries: Seed queries, usually a single unfiltered query
            where: Expression node, or the raw dict emitted by the SQL grammar

        Returns:
            Queries whose combined results are the rows matching `where`

        Raises:
            TranslationError: If any part of the expression cannot be expressed;
                nothing is returned in that case
        """
        node = parse_where(where)
        result = self._translate(list(queries), node)
        self.logger.debug("Translated WHERE %s into %d queries", node.type, len(result))
        if self.warn_multiple_range_fields:
            self._warn_on_multiple_range_fields(result)
        return result

    def apply_condition(self, queries: Sequence[Query], field: str, operator: str, value: Any) -> QuerySet:
        """Apply one `field operator value` condition to every query.

        Not-equal has no native filter: on booleans it becomes equality with the
        negated value, otherwise the query set is split into `<` and `>` halves.
        Documents missing `field` or holding a value of another type match neither half.
        """
        if operator in NOT_EQUAL_OPERATORS:
            if isinstance(value, (BoolValue, bool)):
                negated = not ast_value_to_native(value)
                return self.apply_condition(queries, field, SqlOperator.EQ, BoolValue(value=negated))
            self.logger.debug("Splitting %s %s into < and > queries", field, operator)
            return [
                *self.apply_condition(queries, field, SqlOperator.LT, value),
                *self.apply_condition(queries, field, SqlOperator.GT, value),
            ]

        op = map_operator(operator)
        native = ast_value_to_native(value)
        return [query.where(field, op, native) for query in queries]

    # -------------------
    # Node dispatch
    # -------------------

    def _translate(self, queries: QuerySet, node: ExpressionNode) -> QuerySet:
        if isinstance(node, BinaryExpr):
            rule = self._BINARY_RULES.get(node.operator, WhereTranslator._translate_comparison)
            return rule(self, queries, node)
        if isinstance(node, ColumnRef):
            # "WHERE column" matches literal true only; the store has no truthiness filter
            return self.apply_condition(queries, node.column, SqlOperator.EQ, BoolValue(value=True))
        raise UnsupportedConstructError("Unsupported WHERE clause", node_type=getattr(node, "type", None))

    def _translate_and(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        queries = self._translate(queries, node.left)
        return self._translate(queries, node.right)

    def _translate_or(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        left = self._translate(queries, node.left)
        right = self._translate(queries, node.right)
        self.logger.debug("OR fan-out: %d + %d queries", len(left), len(right))
        return [*left, *right]

    def _translate_in(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        field = self._column(node)
        assert_that(
            isinstance(node.right, ExprList), "Unsupported WHERE type on right side.", operator=node.operator
        )
        result: List[Query] = []
        for value in node.right.value:
            result.extend(self.apply_condition(queries, field, SqlOperator.EQ, value))
        self.logger.debug("IN on %s fanned out over %d values", field, len(node.right.value))
        return result

    def _translate_like(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        field = self._column(node)
        assert_that(
            isinstance(node.right, StringValue),
            "Only strings are supported with LIKE in WHERE clause.",
            node_type=node.right.type,
        )
        pattern = node.right.value
        like = decompose_like(pattern)

        if like.equals is not None:
            return self.apply_condition(queries, field, SqlOperator.EQ, StringValue(value=like.equals))
        if like.begins_with is not None:
            queries = self.apply_condition(queries, field, SqlOperator.GTE, StringValue(value=like.begins_with))
            upper = prefix_successor(like.begins_with)
            if upper is None:
                # Nothing sorts above the prefix, so the lower bound alone is exact
                return queries
            return self.apply_condition(queries, field, SqlOperator.LT, StringValue(value=upper))
        raise UnsupportedLikeError(
            'Only terms in the form of "value%" (string begins with value) and "value" '
            "(string equals value) are supported with LIKE in WHERE clause.",
            pattern=pattern,
            shape=like.kind,
        )

    def _translate_between(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        field = self._column(node)
        assert_that(
            isinstance(node.right, ExprList) and len(node.right.value) == 2,
            "BETWEEN needs 2 values in WHERE clause.",
        )
        low, high = node.right.value
        queries = self.apply_condition(queries, field, SqlOperator.GTE, low)
        return self.apply_condition(queries, field, SqlOperator.LTE, high)

    def _translate_contains(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        field = self._column(node)
        assert_that(
            node.right.type in VALUE_TYPES,
            "Only strings, numbers, booleans, and null are supported with CONTAINS in WHERE clause.",
            node_type=node.right.type,
        )
        return self.apply_condition(queries, field, node.operator, node.right)

    def _translate_comparison(self, queries: QuerySet, node: BinaryExpr) -> QuerySet:
        field = self._column(node)
        return self.apply_condition(queries, field, node.operator, node.right)

    # Binary operators with a dedicated rewrite; every other operator is a plain comparison
    _BINARY_RULES: Dict[str, Callable[["WhereTranslator", QuerySet, BinaryExpr], QuerySet]] = {
        SqlOperator.AND: _translate_and,
        SqlOperator.OR: _translate_or,
        SqlOperator.IN: _translate_in,
        SqlOperator.LIKE: _translate_like,
        SqlOperator.BETWEEN: _translate_between,
        SqlOperator.CONTAINS: _translate_contains,
    }

    def _column(self, node: BinaryExpr) -> str:
        assert_that(
            isinstance(node.left, ColumnRef),
            "Unsupported WHERE type on left side.",
            operator=node.operator,
            node_type=node.left.type,
        )
        return node.left.column

    def _warn_on_multiple_range_fields(self, queries: QuerySet) -> None:
        for query in queries:
            if isinstance(query, FilterQuery) and len(query.range_fields) > 1:
                self.logger.warning(
                    "Query has range filters on several fields (%s); the store accepts only one",
                    ", ".join(query.range_fields),
                )


where_translator = WhereTranslator()


def translate_where(initial_queries: Sequence[Query], where_node: Union[ExpressionNode, Dict[str, Any]]) -> QuerySet:
    """Translate `where_node` against `initial_queries` with the default translator."""
    return where_translator.translate(initial_queries, where_node)
