"""Cursor pagination over in-memory collections.

The paginator sorts the caller's items by an ordering key, narrows them to
the keys strictly between the `after` and `before` cursors, then slices a
window of `first` items from the front or `last` items from the back.

`hasPreviousPage` for a forward request and `hasNextPage` for a backward
request are taken from the presence of `after` / `before` alone. They are not
checked against the data, so an `after` cursor past the last item still
reports a previous page. Existing clients depend on this, so keep it.
"""

import logging
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Generic, TypeVar

from relay_pagination.api.schemas.connection import Connection, ConnectionArguments
from relay_pagination.core.config import settings
from relay_pagination.core.errors import PaginationError
from relay_pagination.core.observability import metrics
from relay_pagination.domain.enums import OrderDirection, PaginationWindow
from relay_pagination.pagination.builder import build_connection
from relay_pagination.pagination.codec import CursorCodec
from relay_pagination.pagination.ordering import Comparator, natural_order, resolve_comparator
from relay_pagination.pagination.validation import check_connection_parameters

logger = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")


class CursorPaginator(Generic[I, T]):
    """
    Paginates items of type T ordered by a key of type I.

    Args:
        name: Connection name, used in error messages, logs and metrics
        key: Extracts the ordering key from an item
        codec: Encodes keys into cursors and back
        comparator: Base order of the keys (ascending)
        max_first: Largest accepted `first`; defaults to settings.max_first
        max_last: Largest accepted `last`; defaults to settings.max_last
    """

    def __init__(
        self,
        name: str,
        key: Callable[[T], I],
        codec: CursorCodec[I],
        comparator: Comparator[I] = natural_order,
        *,
        max_first: int | None = None,
        max_last: int | None = None,
    ) -> None:
        self.name = name
        self.key = key
        self.codec = codec
        self.comparator = comparator
        self.max_first = settings.max_first if max_first is None else max_first
        self.max_last = settings.max_last if max_last is None else max_last

    def __repr__(self) -> str:
        return f"CursorPaginator(name={self.name!r}, codec={self.codec.name!r})"

    def paginate(
        self,
        items: Iterable[T],
        direction: OrderDirection | str | None = None,
        after: str | None = None,
        before: str | None = None,
        first: int | None = None,
        last: int | None = None,
    ) -> Connection[T]:
        """
        Return one page of ``items`` as a connection.

        Raises:
            MissingPaginationBoundariesError: Neither `first` nor `last` given
            AmbiguousPaginationError: Both `first` and `last` given
            InvalidPaginationError: Negative or non-integer bound, or unknown direction
            ExcessivePaginationError: Bound above its maximum
            InvalidCursorError: `after` or `before` does not decode with this codec
        """
        try:
            return self._paginate(items, direction, after, before, first, last)
        except PaginationError as e:
            metrics.record_error(self.name, e)
            logger.warning(
                f"{e.__class__.__name__}: {e.message}",
                extra={"connection": self.name, "details": e.details},
            )
            raise

    def paginate_arguments(
        self, items: Iterable[T], arguments: ConnectionArguments
    ) -> Connection[T]:
        """Paginate using arguments parsed from a client request."""
        return self.paginate(
            items,
            direction=arguments.direction,
            after=arguments.after,
            before=arguments.before,
            first=arguments.first,
            last=arguments.last,
        )

    def _paginate(
        self,
        items: Iterable[T],
        direction: OrderDirection | str | None,
        after: str | None,
        before: str | None,
        first: int | None,
        last: int | None,
    ) -> Connection[T]:
        check_connection_parameters(
            self.name,
            after,
            before,
            first,
            last,
            max_first=self.max_first,
            max_last=self.max_last,
        )
        comparator = resolve_comparator(self.comparator, direction)

        # Pair each item with its key once; sorted() is stable so ties keep input order
        keyed = [(self.key(item), item) for item in items]
        ordered = sorted(keyed, key=cmp_to_key(lambda a, b: comparator(a[0], b[0])))
        bounded = self._apply_cursor_filters(ordered, comparator, after, before)

        if first is not None:
            window = bounded[: first + 1]
            has_next_page = len(window) > first
            if has_next_page:
                window = window[:first]
            has_previous_page = after is not None
            kind = PaginationWindow.FORWARD
        else:
            # Take one extra item from the tail; it only signals an earlier page
            window = bounded[max(0, len(bounded) - last - 1) :]
            has_previous_page = len(window) > last
            if has_previous_page:
                window = window[1:]
            has_next_page = before is not None
            kind = PaginationWindow.BACKWARD

        connection = build_connection(
            window,
            self.codec,
            has_previous_page=has_previous_page,
            has_next_page=has_next_page,
            total_count=len(keyed),
        )
        metrics.record_page(self.name, kind.value, len(window), len(keyed))
        logger.debug(
            "Paginated %s connection: %d of %d items",
            self.name,
            len(window),
            len(keyed),
            extra={"connection": self.name, "window": kind.value},
        )
        return connection

    def _apply_cursor_filters(
        self,
        ordered: list[tuple[I, T]],
        comparator: Comparator[I],
        after: str | None,
        before: str | None,
    ) -> list[tuple[I, T]]:
        if after is None and before is None:
            return ordered
        bounded = ordered
        if after is not None:
            after_key = self.codec.decode(after)
            bounded = [pair for pair in bounded if comparator(pair[0], after_key) > 0]
        if before is not None:
            before_key = self.codec.decode(before)
            bounded = [pair for pair in bounded if comparator(pair[0], before_key) < 0]
        return bounded
