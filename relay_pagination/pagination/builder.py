"""Assemble connections from an already computed window."""

from collections.abc import Sequence
from typing import TypeVar

from relay_pagination.api.schemas.connection import Connection, Edge, PageInfo
from relay_pagination.pagination.codec import CursorCodec

I = TypeVar("I")
T = TypeVar("T")


def build_edges(window: Sequence[tuple[I, T]], codec: CursorCodec[I]) -> list[Edge]:
    """One edge per ``(key, item)`` pair, in window order."""
    return [Edge(node=item, cursor=codec.encode(key)) for key, item in window]


def build_page_info(
    edges: Sequence[Edge], has_previous_page: bool, has_next_page: bool
) -> PageInfo:
    if not edges:
        return PageInfo.empty()
    return PageInfo(
        start_cursor=edges[0].cursor,
        end_cursor=edges[-1].cursor,
        has_previous_page=has_previous_page,
        has_next_page=has_next_page,
    )


def build_connection(
    window: Sequence[tuple[I, T]],
    codec: CursorCodec[I],
    *,
    has_previous_page: bool,
    has_next_page: bool,
    total_count: int,
) -> Connection[T]:
    """
    Build the connection for a window of ``(key, item)`` pairs.

    An empty window always gets the canonical empty page info, whatever the
    flags say.
    """
    edges = build_edges(window, codec)
    return Connection(
        edges=edges,
        nodes=[item for _, item in window],
        page_info=build_page_info(edges, has_previous_page, has_next_page),
        total_count=total_count,
    )
