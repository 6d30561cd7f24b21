"""Pytest configuration and fixtures for WHERE translation tests."""

from typing import Any, List, Tuple

import pytest
from dotenv import load_dotenv

from firesql.query import FilterQuery, Query
from firesql.where.translator import WhereTranslator

# Load environment variables
load_dotenv()


def filter_tuples(queries: List[Query]) -> List[List[Tuple[str, str, Any]]]:
    """Flatten a query set into [(field, op, value), ...] per query."""
    return [[(f.field, f.op, f.value) for f in q.filters] for q in queries]


@pytest.fixture
def seed() -> List[FilterQuery]:
    """A single unfiltered query, as supplied by the SELECT compiler."""
    return [FilterQuery(collection="shops")]


@pytest.fixture
def translator() -> WhereTranslator:
    return WhereTranslator(warn_multiple_range_fields=False)


@pytest.fixture
def shops_where():
    """Raw parser output for: city IN ('Paris', 'Rome') AND (rating >= 4 OR name LIKE 'Jo%')."""
    return {
        "type": "binary_expr",
        "operator": "AND",
        "left": {
            "type": "binary_expr",
            "operator": "IN",
            "left": {"type": "column_ref", "table": None, "column": "city"},
            "right": {
                "type": "expr_list",
                "value": [{"type": "string", "value": "Paris"}, {"type": "string", "value": "Rome"}],
            },
        },
        "right": {
            "type": "binary_expr",
            "operator": "OR",
            "left": {
                "type": "binary_expr",
                "operator": ">=",
                "left": {"type": "column_ref", "table": None, "column": "rating"},
                "right": {"type": "number", "value": 4},
            },
            "right": {
                "type": "binary_expr",
                "operator": "LIKE",
                "left": {"type": "column_ref", "table": None, "column": "name"},
                "right": {"type": "string", "value": "Jo%"},
            },
        },
    }
