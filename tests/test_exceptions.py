"""Tests for the exception hierarchy and message formatting."""

import pytest

from firesql.exceptions import (
    FireSQLError,
    InvalidExpressionError,
    ShapeError,
    TranslationError,
    UnknownOperatorError,
    UnsupportedConstructError,
    UnsupportedLikeError,
    UnsupportedOperatorError,
)


class TestFireSQLError:
    def test_message_only(self):
        err = FireSQLError("Unsupported WHERE clause")
        assert str(err) == "Unsupported WHERE clause"
        assert err.details == {}

    def test_message_with_details(self):
        err = FireSQLError("Unknown WHERE operator", operator="REGEXP")
        assert str(err) == "Unknown WHERE operator (operator='REGEXP')"

    def test_details_only(self):
        assert str(FireSQLError(pattern="%a")) == "pattern='%a'"

    def test_repr(self):
        err = FireSQLError("boom", node_type="function")
        assert repr(err) == "FireSQLError(message='boom', details={'node_type': 'function'})"


@pytest.mark.parametrize(
    "cls,parents",
    [
        (ShapeError, (TranslationError,)),
        (InvalidExpressionError, (ShapeError, TranslationError)),
        (UnsupportedConstructError, (TranslationError,)),
        (UnsupportedLikeError, (UnsupportedConstructError, TranslationError)),
        (UnsupportedOperatorError, (UnsupportedConstructError, TranslationError)),
        (UnknownOperatorError, (TranslationError,)),
    ],
)
def test_hierarchy(cls, parents):
    err = cls("x")
    for parent in parents:
        assert isinstance(err, parent)
    assert isinstance(err, FireSQLError)
    assert isinstance(err, Exception)
