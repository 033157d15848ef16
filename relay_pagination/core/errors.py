"""
Pagination exceptions.

Every exception here is a client-input error: the caller asked for a window
or supplied a cursor the engine cannot honour. They are raised synchronously,
abort the pagination call, and are mapped to request-rejection responses by
the query-serving layer.
"""

from typing import Any

GRAPHQL_BAD_REQUEST = "BAD_REQUEST"


class PaginationError(Exception):
    """Base exception for all pagination errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MissingPaginationBoundariesError(PaginationError):
    """
    Raised when neither `first` nor `last` is supplied.

    HTTP Status: 400 Bad Request
    """

    pass


class AmbiguousPaginationError(PaginationError):
    """
    Raised when both `first` and `last` are supplied.

    HTTP Status: 400 Bad Request
    """

    pass


class InvalidPaginationError(PaginationError):
    """
    Raised when a window bound is unusable.

    Examples:
    - `first` or `last` is negative
    - `first` or `last` is not an integer
    - Unknown order direction

    HTTP Status: 400 Bad Request
    """

    pass


class ExcessivePaginationError(PaginationError):
    """
    Raised when a window bound exceeds its configured maximum.

    HTTP Status: 400 Bad Request
    """

    pass


class InvalidCursorError(PaginationError, ValueError):
    """
    Raised when a cursor cannot be encoded or decoded.

    Examples:
    - Token is not valid base64
    - Decoded text does not parse as the connection's key type
    - Key value is not supported by the codec (e.g. a naive datetime)

    HTTP Status: 400 Bad Request
    """

    def __init__(self, message: str = "Invalid cursor", details: dict[str, Any] | None = None):
        super().__init__(message, details)


# HTTP Status Code Mapping
ERROR_STATUS_MAP = {
    MissingPaginationBoundariesError: 400,
    AmbiguousPaginationError: 400,
    InvalidPaginationError: 400,
    ExcessivePaginationError: 400,
    InvalidCursorError: 400,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)


def to_error_response(error: PaginationError) -> dict[str, Any]:
    """Build the JSON body returned for a rejected REST request."""
    return {
        "error": error.__class__.__name__,
        "message": error.message,
        "details": error.details,
    }


def to_graphql_error(error: PaginationError) -> dict[str, Any]:
    """Build a GraphQL error entry classified as a bad request."""
    return {
        "message": error.message,
        "extensions": {
            "classification": GRAPHQL_BAD_REQUEST,
            "code": error.__class__.__name__,
            "details": error.details,
        },
    }
