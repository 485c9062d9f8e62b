"""Wire shapes produced by the paginators."""

from __future__ import annotations

from typing import Generic, List, Optional, TypedDict, TypeVar

T = TypeVar("T")


class PaginationLinks(TypedDict):
    """Page-number links of a length-aware paginator."""

    first: int
    last: int
    prev: Optional[int]
    next: Optional[int]


# "from" is a keyword, hence the functional syntax.
LengthAwareMeta = TypedDict(
    "LengthAwareMeta",
    {
        "total": int,
        "perPage": int,
        "currentPage": int,
        "lastPage": int,
        "from": Optional[int],
        "to": Optional[int],
    },
)


class LengthAwareResponse(TypedDict, Generic[T]):
    data: List[T]
    meta: LengthAwareMeta


LengthAwareJSON = TypedDict(
    "LengthAwareJSON",
    {
        "data": list,
        "total": int,
        "perPage": int,
        "currentPage": int,
        "lastPage": int,
        "from": Optional[int],
        "to": Optional[int],
        "links": PaginationLinks,
    },
)


class CursorPaginationLinks(TypedDict):
    """URL links of a cursor paginator."""

    first: str
    prev: Optional[str]
    next: Optional[str]


class _CursorMetaBase(TypedDict):
    perPage: int
    nextCursor: Optional[str]
    prevCursor: Optional[str]


class CursorMeta(_CursorMetaBase, total=False):
    # Absent when the paginator has no base path.
    path: str


class CursorResponse(TypedDict, Generic[T]):
    data: List[T]
    meta: CursorMeta


class _CursorJSONBase(TypedDict):
    data: list
    perPage: int
    nextCursor: Optional[str]
    prevCursor: Optional[str]
    links: CursorPaginationLinks


class CursorJSON(_CursorJSONBase, total=False):
    path: str
