"""
Paginators for the connections the download API exposes.

Both read the key by attribute, so any record with a ``created_at`` aware
datetime (versions) or an integer ``number`` (builds) can be paginated.
"""

from datetime import datetime
from operator import attrgetter
from typing import Any

from relay_pagination.pagination.codec import INSTANT, INT
from relay_pagination.pagination.paginator import CursorPaginator

VERSION_PAGINATOR: CursorPaginator[datetime, Any] = CursorPaginator(
    "versions",
    attrgetter("created_at"),
    INSTANT,
)

BUILD_PAGINATOR: CursorPaginator[int, Any] = CursorPaginator(
    "builds",
    attrgetter("number"),
    INT,
)
