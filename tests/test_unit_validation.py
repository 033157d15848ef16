"""
Unit tests for connection argument validation.

Tests cover:
- Mutually exclusive `first` / `last`
- Negative and non-integer bounds
- Maximum window sizes, including custom limits
- Order of checks
"""

import pytest

from relay_pagination.core.config import DEFAULT_MAX_FIRST, DEFAULT_MAX_LAST
from relay_pagination.core.errors import (
    AmbiguousPaginationError,
    ExcessivePaginationError,
    InvalidPaginationError,
    MissingPaginationBoundariesError,
)
from relay_pagination.pagination.validation import check_connection_parameters

CONNECTION = "test"


class TestCheckConnectionParameters:
    """Tests for check_connection_parameters."""

    def test_missing_boundaries(self):
        with pytest.raises(MissingPaginationBoundariesError) as exc_info:
            check_connection_parameters(CONNECTION, None, None, None, None)
        assert exc_info.value.message == (
            "You must provide a `first` or `last` value to properly paginate the `test` connection."
        )
        assert exc_info.value.details == {"connection": CONNECTION}

    def test_cursors_alone_are_not_boundaries(self):
        """`after` / `before` without a window size is still missing boundaries."""
        with pytest.raises(MissingPaginationBoundariesError):
            check_connection_parameters(CONNECTION, "Mg==", "OA==", None, None)

    def test_ambiguous_first_and_last(self):
        with pytest.raises(AmbiguousPaginationError, match="both `first` and `last`"):
            check_connection_parameters(CONNECTION, None, None, 1, 1)

    def test_first_alone_accepted(self):
        check_connection_parameters(CONNECTION, None, None, 1, None)

    def test_last_alone_accepted(self):
        check_connection_parameters(CONNECTION, None, None, None, 1)

    def test_zero_accepted(self):
        check_connection_parameters(CONNECTION, None, None, 0, None)
        check_connection_parameters(CONNECTION, None, None, None, 0)

    def test_negative_first(self):
        with pytest.raises(InvalidPaginationError, match="`first` on the `test` connection"):
            check_connection_parameters(CONNECTION, None, None, -1, None)

    def test_negative_last(self):
        with pytest.raises(InvalidPaginationError, match="`last` on the `test` connection"):
            check_connection_parameters(CONNECTION, None, None, None, -1)

    def test_first_at_maximum_accepted(self):
        check_connection_parameters(CONNECTION, None, None, DEFAULT_MAX_FIRST, None)

    def test_last_at_maximum_accepted(self):
        check_connection_parameters(CONNECTION, None, None, None, DEFAULT_MAX_LAST)

    def test_excessive_first(self):
        with pytest.raises(ExcessivePaginationError) as exc_info:
            check_connection_parameters(CONNECTION, None, None, DEFAULT_MAX_FIRST + 1, None)
        assert exc_info.value.message == (
            "Requesting 101 records on the `test` connection exceeds "
            "the `first` limit of 100 records."
        )
        assert exc_info.value.details["limit"] == DEFAULT_MAX_FIRST

    def test_excessive_last(self):
        with pytest.raises(ExcessivePaginationError, match="`last` limit of 100"):
            check_connection_parameters(CONNECTION, None, None, None, DEFAULT_MAX_LAST + 1)

    def test_custom_limits_are_independent(self):
        check_connection_parameters(CONNECTION, None, None, None, 50, max_first=10, max_last=50)
        with pytest.raises(ExcessivePaginationError):
            check_connection_parameters(CONNECTION, None, None, 11, None, max_first=10)
        with pytest.raises(ExcessivePaginationError):
            check_connection_parameters(CONNECTION, None, None, None, 51, max_last=50)

    @pytest.mark.parametrize("bound", ["5", 2.0, True])
    def test_non_integer_first(self, bound):
        with pytest.raises(InvalidPaginationError, match="must be an integer"):
            check_connection_parameters(CONNECTION, None, None, bound, None)

    def test_ambiguity_reported_before_range(self):
        """Both bounds given is reported even when one is also out of range."""
        with pytest.raises(AmbiguousPaginationError):
            check_connection_parameters(CONNECTION, None, None, -1, 1000)
