"""
Pytest configuration and shared fixtures.

Provides:
- Integer-keyed and timestamp-keyed paginators over ``Record``
- Ready-made record lists (numbers 1..5 and 1..10)
"""

from __future__ import annotations

from datetime import datetime

import pytest

from relay_pagination.pagination.codec import INSTANT, INT
from relay_pagination.pagination.paginator import CursorPaginator
from tests.factories import Record, make_records


@pytest.fixture
def int_paginator() -> CursorPaginator[int, Record]:
    return CursorPaginator("records", lambda record: record.number, INT)


@pytest.fixture
def time_paginator() -> CursorPaginator[datetime, Record]:
    return CursorPaginator("records", lambda record: record.created_at, INSTANT)


@pytest.fixture
def ten_records() -> list[Record]:
    return make_records(*range(1, 11))


@pytest.fixture
def five_records() -> list[Record]:
    return make_records(*range(1, 6))
