"""Comparators and order-direction resolution.

A comparator returns a negative number, zero or a positive number, like
``cmp`` in Python 2. Descending order wraps the base comparator instead of
sorting differently, so the window logic in the paginator never needs to know
which direction it is walking.
"""

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

from relay_pagination.core.errors import InvalidPaginationError
from relay_pagination.domain.enums import OrderDirection

K = TypeVar("K")

Comparator: TypeAlias = Callable[[K, K], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two keys by their own ``<`` and ``>``."""
    return (a > b) - (a < b)


def reverse_order(comparator: Comparator[K]) -> Comparator[K]:
    """Return a comparator that negates ``comparator``."""

    def reversed_comparator(a: K, b: K) -> int:
        return -comparator(a, b)

    return reversed_comparator


def coerce_direction(direction: OrderDirection | str | None) -> OrderDirection | None:
    """Accept an OrderDirection or its name in any case."""
    if direction is None or isinstance(direction, OrderDirection):
        return direction
    try:
        return OrderDirection(str(direction).upper())
    except ValueError:
        raise InvalidPaginationError(
            f"`{direction}` is not a valid order direction; expected one of "
            f"{[d.value for d in OrderDirection]}.",
            details={"direction": direction},
        ) from None


def resolve_comparator(
    base: Comparator[K], direction: OrderDirection | str | None
) -> Comparator[K]:
    """Pick the comparator for one call: ``base`` for ASC or unset, reversed for DESC."""
    if coerce_direction(direction) is OrderDirection.DESC:
        return reverse_order(base)
    return base
