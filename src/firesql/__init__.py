"""
firesql translates parsed SQL WHERE clauses into sets of store queries
that only use single-field equality, range and array-membership filters.
"""

from .ast import parse_where
from .query import Filter, FilterQuery, Query, QuerySet
from .where import WhereTranslator, translate_where

__version__ = "0.1.0"

__all__ = [
    "translate_where",
    "WhereTranslator",
    "parse_where",
    "Query",
    "QuerySet",
    "FilterQuery",
    "Filter",
]
