"""Unit tests for comparators and order-direction resolution."""

from functools import cmp_to_key

import pytest

from relay_pagination.core.errors import InvalidPaginationError
from relay_pagination.domain.enums import OrderDirection
from relay_pagination.pagination.ordering import (
    coerce_direction,
    natural_order,
    resolve_comparator,
    reverse_order,
)


def by_length(a: str, b: str) -> int:
    return len(a) - len(b)


class TestNaturalOrder:
    def test_sign_of_comparison(self):
        assert natural_order(1, 2) < 0
        assert natural_order(2, 1) > 0
        assert natural_order(3, 3) == 0

    def test_works_for_strings(self):
        assert natural_order("a", "b") == -1


class TestReverseOrder:
    def test_negates_base_comparator(self):
        reversed_cmp = reverse_order(natural_order)
        assert reversed_cmp(1, 2) > 0
        assert reversed_cmp(2, 1) < 0
        assert reversed_cmp(3, 3) == 0

    def test_wraps_custom_comparator(self):
        reversed_cmp = reverse_order(by_length)
        assert reversed_cmp("aaa", "a") < 0


class TestResolveComparator:
    """Tests for picking the comparator of a call."""

    def test_unset_direction_uses_base(self):
        assert resolve_comparator(by_length, None) is by_length

    def test_ascending_uses_base(self):
        assert resolve_comparator(by_length, OrderDirection.ASC) is by_length

    def test_descending_reverses_base(self):
        comparator = resolve_comparator(natural_order, OrderDirection.DESC)
        assert sorted([3, 1, 2], key=cmp_to_key(comparator)) == [3, 2, 1]

    @pytest.mark.parametrize("value", ["desc", "DESC", "Desc"])
    def test_direction_names_accepted(self, value):
        comparator = resolve_comparator(natural_order, value)
        assert comparator(1, 2) > 0

    def test_unknown_direction_rejected(self):
        with pytest.raises(InvalidPaginationError, match="not a valid order direction"):
            resolve_comparator(natural_order, "sideways")


class TestCoerceDirection:
    def test_passes_enum_and_none_through(self):
        assert coerce_direction(None) is None
        assert coerce_direction(OrderDirection.DESC) is OrderDirection.DESC

    def test_lowercase_name(self):
        assert coerce_direction("asc") is OrderDirection.ASC
