"""Paginating caller-supplied data sources.

The paginators themselves never perform I/O. This module is the thin layer
that runs the queries a page needs against an async source and hands the
results to :func:`length_aware` / :func:`cursor`.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Generic, Optional, TypeVar

from .codec import cursor_string
from .config import CursorConfig, PagesConfig, PaginatorConfig
from .cursor_paginator import CursorColumn, CursorPaginator, cursor_value
from .exceptions import InvalidPageError, InvalidPerPageError, MissingCursorColumnError
from .length_aware import LengthAwarePaginator
from .log import get_logger
from .paginator import cursor as cursor_paginator
from .paginator import decode_cursor, length_aware

T = TypeVar("T")

CursorParser = Callable[[str], Any]


class PageSource(ABC, Generic[T]):
    """Offset-addressable data source."""

    @abstractmethod
    async def fetch(self, offset: int, limit: int) -> list[T]:
        """Return at most ``limit`` rows starting at ``offset``."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of rows."""
        ...


class CursorSource(ABC, Generic[T]):
    """Keyset-addressable data source."""

    @abstractmethod
    async def fetch_after(
        self, after: Optional[Any], limit: int, cursor_column: CursorColumn
    ) -> list[T]:
        """Return at most ``limit`` rows strictly after the cursor row.

        ``after`` is the parsed cursor, or None for the first page. It is a
        value of ``cursor_column``, the same column the next cursor is minted
        from.
        """
        ...


class InMemorySource(PageSource[T], CursorSource[T]):
    """In-memory source over rows already in cursor order."""

    def __init__(self, rows: Sequence[T]) -> None:
        self._rows = list(rows)

    async def fetch(self, offset: int, limit: int) -> list[T]:
        return self._rows[offset : offset + limit]

    async def count(self) -> int:
        return len(self._rows)

    async def fetch_after(
        self, after: Optional[Any], limit: int, cursor_column: CursorColumn
    ) -> list[T]:
        start = 0
        if after is not None:
            key = cursor_string(after)
            for index, row in enumerate(self._rows):
                value = cursor_value(row, cursor_column)
                if value is not None and cursor_string(value) == key:
                    start = index + 1
                    break
            else:
                return []
        return self._rows[start : start + limit]


async def with_pages(
    source: PageSource[T],
    page: Optional[int] = None,
    limit: Optional[int] = None,
    include_page_count: Optional[bool] = None,
    config: Optional[PaginatorConfig] = None,
) -> LengthAwarePaginator[T]:
    """Fetch one offset page and the total count concurrently.

    When the count is disabled the total is reported as 0. The page and
    limit are validated before the source is queried.
    """
    defaults = config.pages if config is not None else PagesConfig()
    page = page if page is not None else 1
    limit = limit if limit is not None else defaults.limit
    if include_page_count is None:
        include_page_count = defaults.include_page_count

    if page < 1:
        raise InvalidPageError(page)
    if limit < 1:
        raise InvalidPerPageError(limit)

    offset = (page - 1) * limit
    if include_page_count:
        items, total = await asyncio.gather(source.fetch(offset, limit), source.count())
    else:
        items, total = await source.fetch(offset, limit), 0

    get_logger().debug(
        "page_fetched",
        page=page,
        limit=limit,
        offset=offset,
        fetched=len(items),
        total=total,
    )
    return length_aware(items, total=total, per_page=limit, current_page=page)


async def with_cursor(
    source: CursorSource[T],
    cursor: Optional[str] = None,
    limit: Optional[int] = None,
    cursor_column: Optional[CursorColumn] = None,
    path: Optional[str] = None,
    config: Optional[PaginatorConfig] = None,
    parse_cursor: CursorParser = decode_cursor,
) -> CursorPaginator[T]:
    """Fetch one cursor page, with one lookahead row.

    ``cursor`` is the token the client sent back; it is parsed with
    ``parse_cursor`` before reaching the source and becomes the page's
    ``prev_cursor``.
    """
    defaults = config.cursor if config is not None else CursorConfig()
    limit = limit if limit is not None else defaults.limit
    column = cursor_column if cursor_column is not None else defaults.cursor_column

    if limit < 1:
        raise InvalidPerPageError(limit)
    if column == "":
        raise MissingCursorColumnError()

    after = parse_cursor(cursor) if cursor else None
    rows = await source.fetch_after(after, limit + 1, column)

    get_logger().debug(
        "cursor_page_fetched",
        limit=limit,
        has_cursor=after is not None,
        fetched=len(rows),
    )
    return cursor_paginator(
        rows,
        per_page=limit,
        cursor_column=column,
        prev_cursor=cursor,
        path=path,
    )
