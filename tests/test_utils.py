"""Tests for utility functions."""

import pytest

from firesql.ast import BoolValue, ColumnRef, NullValue, NumberValue, StringValue, expr_list
from firesql.exceptions import ShapeError, UnsupportedConstructError
from firesql.utils import assert_that, ast_value_to_native, prefix_successor

MAX_CHAR = "\U0010ffff"


class TestPrefixSuccessor:
    """Tests for prefix_successor function."""

    def test_increments_last_character(self):
        assert prefix_successor("Jo") == "Jp"

    def test_single_character(self):
        assert prefix_successor("a") == "b"

    @pytest.mark.parametrize("candidate", ["Jo", "Jon", "Joz", "Jo~", "Joÿ", "Jo" + MAX_CHAR, "Jo" + MAX_CHAR * 3])
    def test_exceeds_every_string_with_prefix(self, candidate):
        assert candidate < prefix_successor("Jo")

    def test_greater_than_prefix(self):
        for prefix in ["a", "Jo", "z", "ÿ", "x" + MAX_CHAR]:
            assert prefix_successor(prefix) > prefix

    def test_drops_trailing_max_code_points(self):
        assert prefix_successor("a" + MAX_CHAR) == "b"
        assert prefix_successor("ab" + MAX_CHAR * 2) == "ac"

    def test_skips_surrogate_block(self):
        result = prefix_successor("a\ud7ff")
        assert result == "a\ue000"
        result.encode("utf-8")

    def test_empty_prefix_has_no_successor(self):
        assert prefix_successor("") is None

    def test_all_max_code_points_have_no_successor(self):
        assert prefix_successor(MAX_CHAR) is None
        assert prefix_successor(MAX_CHAR * 2) is None

    def test_non_ascii(self):
        assert prefix_successor("café") == "cafê"
        assert "café crème" < prefix_successor("café")


class TestAstValueToNative:
    """Tests for ast_value_to_native function."""

    def test_string(self):
        assert ast_value_to_native(StringValue(value="abc")) == "abc"

    def test_number(self):
        assert ast_value_to_native(NumberValue(value=3)) == 3
        assert ast_value_to_native(NumberValue(value=2.5)) == 2.5

    def test_bool(self):
        assert ast_value_to_native(BoolValue(value=False)) is False

    def test_null(self):
        assert ast_value_to_native(NullValue()) is None

    def test_expr_list(self):
        assert ast_value_to_native(expr_list("a", 1, None)) == ["a", 1, None]

    @pytest.mark.parametrize("value", ["x", 1, 1.5, True, None])
    def test_plain_scalars_pass_through(self, value):
        assert ast_value_to_native(value) == value

    def test_column_ref_rejected(self):
        with pytest.raises(ShapeError, match="Only literal values"):
            ast_value_to_native(ColumnRef(column="other"))

    def test_unknown_python_type_rejected(self):
        with pytest.raises(ShapeError) as exc_info:
            ast_value_to_native(object())
        assert exc_info.value.details["value_type"] == "object"


class TestAssertThat:
    """Tests for assert_that function."""

    def test_passes_silently(self):
        assert assert_that(True, "never raised") is None

    def test_raises_shape_error_by_default(self):
        with pytest.raises(ShapeError, match="left side"):
            assert_that(False, "Unsupported WHERE type on left side.")

    def test_custom_error_and_details(self):
        with pytest.raises(UnsupportedConstructError) as exc_info:
            assert_that(0, "nope", UnsupportedConstructError, node_type="function")
        assert exc_info.value.details == {"node_type": "function"}
