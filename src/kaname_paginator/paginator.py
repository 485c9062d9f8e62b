"""Entry points for building paginators."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional, TypeVar

from . import codec
from .cursor_paginator import CursorColumn, CursorPaginator
from .length_aware import LengthAwarePaginator

T = TypeVar("T")


def length_aware(
    items: Sequence[T],
    total: int,
    per_page: int,
    current_page: int,
) -> LengthAwarePaginator[T]:
    """Create an offset-based paginator. See :meth:`LengthAwarePaginator.create`."""
    return LengthAwarePaginator.create(items, total, per_page, current_page)


def cursor(
    items: Sequence[T],
    per_page: int,
    cursor_column: CursorColumn,
    prev_cursor: Optional[str] = None,
    path: Optional[str] = None,
) -> CursorPaginator[T]:
    """Create a cursor-based paginator. See :meth:`CursorPaginator.create`."""
    return CursorPaginator.create(items, per_page, cursor_column, prev_cursor, path)


def decode_cursor(cursor: str) -> str:
    """Decode a cursor received from a client, e.g. before building the next query."""
    return codec.decode_cursor(cursor)


def is_length_aware_response(response: Any) -> bool:
    """True if ``response`` has the shape of :meth:`LengthAwarePaginator.to_response`."""
    if not isinstance(response, dict) or "data" not in response:
        return False
    meta = response.get("meta")
    return isinstance(meta, dict) and all(
        key in meta for key in ("total", "currentPage", "lastPage")
    )


def is_cursor_response(response: Any) -> bool:
    """True if ``response`` has the shape of :meth:`CursorPaginator.to_response`."""
    if not isinstance(response, dict) or "data" not in response:
        return False
    meta = response.get("meta")
    return isinstance(meta, dict) and "nextCursor" in meta and "total" not in meta
