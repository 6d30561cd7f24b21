"""
Operator tokens shared by the AST, the operator mapper and the translator.
"""


class SqlOperator:
    AND = "AND"
    OR = "OR"
    IN = "IN"
    LIKE = "LIKE"
    BETWEEN = "BETWEEN"
    CONTAINS = "CONTAINS"
    CONTAINS_ANY = "CONTAINS-ANY"
    EQ = "="
    IS = "IS"
    NE = "!="
    NE_ALT = "<>"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    NOT = "NOT"
    NOT_CONTAINS = "NOT CONTAINS"
    NOT_IN = "NOT IN"
    NOT_LIKE = "NOT LIKE"
    NOT_BETWEEN = "NOT BETWEEN"


class FilterOp:
    EQ = "=="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    ARRAY_CONTAINS = "array-contains"
    ARRAY_CONTAINS_ANY = "array-contains-any"


NOT_EQUAL_OPERATORS = frozenset({SqlOperator.NE, SqlOperator.NE_ALT})

RANGE_FILTER_OPS = frozenset({FilterOp.LT, FilterOp.LTE, FilterOp.GT, FilterOp.GTE})
