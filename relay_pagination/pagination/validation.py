"""Precondition checks for connection arguments."""

from relay_pagination.core.config import DEFAULT_MAX_FIRST, DEFAULT_MAX_LAST
from relay_pagination.core.errors import (
    AmbiguousPaginationError,
    ExcessivePaginationError,
    InvalidPaginationError,
    MissingPaginationBoundariesError,
)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_bound(name: str, argument: str, value: object, maximum: int) -> None:
    details = {"connection": name, argument: value}
    if not _is_count(value):
        raise InvalidPaginationError(
            f"`{argument}` on the `{name}` connection must be an integer.", details=details
        )
    if value < 0:
        raise InvalidPaginationError(
            f"`{argument}` on the `{name}` connection cannot be less than zero.",
            details=details,
        )
    if value > maximum:
        raise ExcessivePaginationError(
            f"Requesting {value} records on the `{name}` connection exceeds the "
            f"`{argument}` limit of {maximum} records.",
            details={**details, "limit": maximum},
        )


def check_connection_parameters(
    name: str,
    after: str | None,
    before: str | None,
    first: int | None,
    last: int | None,
    *,
    max_first: int = DEFAULT_MAX_FIRST,
    max_last: int = DEFAULT_MAX_LAST,
) -> None:
    """
    Reject argument combinations that cannot describe a page.

    Checks run in a fixed order so the same request always reports the same
    error: missing bounds, both bounds, then `first`, then `last`.

    Args:
        name: Connection name used in error messages
        after: Lower-bound cursor (not decoded here)
        before: Upper-bound cursor (not decoded here)
        first: Forward window size
        last: Backward window size
        max_first: Largest accepted `first`
        max_last: Largest accepted `last`

    Raises:
        MissingPaginationBoundariesError: Neither `first` nor `last` given
        AmbiguousPaginationError: Both `first` and `last` given
        InvalidPaginationError: A bound is negative or not an integer
        ExcessivePaginationError: A bound exceeds its maximum
    """
    if first is None and last is None:
        raise MissingPaginationBoundariesError(
            "You must provide a `first` or `last` value to properly paginate "
            f"the `{name}` connection.",
            details={"connection": name},
        )
    if first is not None and last is not None:
        raise AmbiguousPaginationError(
            f"Passing both `first` and `last` to paginate the `{name}` connection "
            "is not supported.",
            details={"connection": name, "first": first, "last": last},
        )
    if first is not None:
        _check_bound(name, "first", first, max_first)
    else:
        _check_bound(name, "last", last, max_last)
