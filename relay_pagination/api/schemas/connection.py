"""Relay connection schemas."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from relay_pagination.domain.enums import OrderDirection

T = TypeVar("T")

_RESULT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    arbitrary_types_allowed=True,
)


class PageInfo(BaseModel):
    """Boundaries of the returned page."""

    model_config = _RESULT_CONFIG

    start_cursor: str | None = None
    end_cursor: str | None = None
    has_previous_page: bool = False
    has_next_page: bool = False

    @classmethod
    def empty(cls) -> "PageInfo":
        """The page info of a connection with no edges."""
        return EMPTY_PAGE_INFO


EMPTY_PAGE_INFO = PageInfo()


class Edge(BaseModel, Generic[T]):
    """One node together with the cursor that addresses it."""

    model_config = _RESULT_CONFIG

    node: T
    cursor: str


class Connection(BaseModel, Generic[T]):
    """A paginated slice of a collection."""

    model_config = _RESULT_CONFIG

    edges: list[Edge] = Field(default_factory=list)
    nodes: list[T] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo.empty)
    total_count: int = 0

    def to_graphql(self) -> dict[str, Any]:
        """Serialize with GraphQL field names (pageInfo, totalCount, ...)."""
        return self.model_dump(by_alias=True)


class ConnectionArguments(BaseModel):
    """
    Pagination arguments as received from a client request.

    Range checks are left to the paginator so that a bad request surfaces as
    one of the named pagination errors rather than a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    after: str | None = None
    before: str | None = None
    # Values that are not counts or known directions pass through unchanged
    first: int | float | str | None = Field(default=None, union_mode="left_to_right")
    last: int | float | str | None = Field(default=None, union_mode="left_to_right")
    direction: OrderDirection | str | None = Field(default=None, union_mode="left_to_right")
