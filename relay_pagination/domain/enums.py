"""
Domain enums shared by the pagination engine and its callers.
"""

from enum import Enum


class OrderDirection(str, Enum):
    """Requested ordering of a connection, relative to the key's natural order."""

    ASC = "ASC"
    DESC = "DESC"


class PaginationWindow(str, Enum):
    """Which end of the ordered sequence a request slices from."""

    FORWARD = "forward"  # first/after
    BACKWARD = "backward"  # last/before
