"""Test data factories shared by the test modules and fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from relay_pagination.api.schemas.connection import Connection

BASE_TIME = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@dataclass(frozen=True)
class Record:
    """Stand-in for a build or version row."""

    id: str
    number: int
    created_at: datetime = BASE_TIME


def make_records(*numbers: int) -> list[Record]:
    """One record per number, ``created_at`` offset from BASE_TIME by ``number`` hours."""
    return [
        Record(id=f"rec-{i}", number=n, created_at=BASE_TIME + timedelta(hours=n))
        for i, n in enumerate(numbers)
    ]


def keys_of(connection: Connection) -> list[int]:
    return [node.number for node in connection.nodes]
