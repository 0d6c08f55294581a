"""Tests for structural equality of document values."""

import math

from docaudit.audit.models.values import is_plain_object, values_equal
from tests.factories import nested_document


class TestIsPlainObject:
    """Tests for is_plain_object."""

    def test_dict_is_plain_object(self) -> None:
        assert is_plain_object({}) is True

    def test_list_and_scalars_are_not(self) -> None:
        for value in ([], [1], None, "a", 1, 1.5, True):
            assert is_plain_object(value) is False


class TestValuesEqual:
    """Tests for values_equal."""

    def test_scalars(self) -> None:
        assert values_equal("a", "a")
        assert not values_equal("a", "b")
        assert values_equal(None, None)
        assert not values_equal(None, "")

    def test_mapping_key_order_is_ignored(self) -> None:
        """Serialisation order must not make equal documents differ."""
        assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_mapping_key_sets_must_match(self) -> None:
        assert not values_equal({"a": 1}, {"a": 1, "b": None})

    def test_nested_mappings(self) -> None:
        assert values_equal({"a": {"b": [1, {"c": 2}]}}, {"a": {"b": [1, {"c": 2}]}})
        assert not values_equal({"a": {"b": [1, {"c": 2}]}}, {"a": {"b": [1, {"c": 3}]}})

    def test_list_order_matters(self) -> None:
        assert values_equal([1, 2], [1, 2])
        assert not values_equal([1, 2], [2, 1])
        assert not values_equal([1], [1, 1])

    def test_list_and_tuple_compare_structurally(self) -> None:
        assert values_equal([1, 2], (1, 2))

    def test_nan_equals_nan(self) -> None:
        assert values_equal(math.nan, math.nan)
        assert values_equal([math.nan], [float("nan")])

    def test_bool_never_equals_number(self) -> None:
        assert not values_equal(True, 1)
        assert not values_equal(0, False)
        assert values_equal(False, False)

    def test_int_equals_float(self) -> None:
        assert values_equal(1, 1.0)

    def test_mapping_never_equals_list(self) -> None:
        assert not values_equal({}, [])
        assert not values_equal({"a": 1}, None)


class TestDeepNesting:
    """Deeply nested values compare without recursion errors."""

    def test_equal_deep_documents(self) -> None:
        assert values_equal(nested_document(5000, 1), nested_document(5000, 1))

    def test_different_deep_leaf(self) -> None:
        assert not values_equal(nested_document(5000, 1), nested_document(5000, 2))

    def test_deep_lists(self) -> None:
        left: list = [1]
        right: list = [1]
        for _ in range(5000):
            left, right = [left], [right]
        assert values_equal(left, right)
