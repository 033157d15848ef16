"""Relay-style cursor pagination over in-memory collections."""

from relay_pagination.api.schemas.connection import (
    Connection,
    ConnectionArguments,
    Edge,
    PageInfo,
)
from relay_pagination.core.errors import (
    AmbiguousPaginationError,
    ExcessivePaginationError,
    InvalidCursorError,
    InvalidPaginationError,
    MissingPaginationBoundariesError,
    PaginationError,
)
from relay_pagination.domain.enums import OrderDirection
from relay_pagination.pagination.codec import INSTANT, INT, CursorCodec, get_codec, register_codec
from relay_pagination.pagination.ordering import natural_order, resolve_comparator, reverse_order
from relay_pagination.pagination.paginator import CursorPaginator
from relay_pagination.pagination.paginators import BUILD_PAGINATOR, VERSION_PAGINATOR
from relay_pagination.pagination.validation import check_connection_parameters

__all__ = [
    "AmbiguousPaginationError",
    "BUILD_PAGINATOR",
    "Connection",
    "ConnectionArguments",
    "CursorCodec",
    "CursorPaginator",
    "Edge",
    "ExcessivePaginationError",
    "INSTANT",
    "INT",
    "InvalidCursorError",
    "InvalidPaginationError",
    "MissingPaginationBoundariesError",
    "OrderDirection",
    "PageInfo",
    "PaginationError",
    "VERSION_PAGINATOR",
    "check_connection_parameters",
    "get_codec",
    "natural_order",
    "register_codec",
    "resolve_comparator",
    "reverse_order",
]
