"""Cursor-based pagination."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from .codec import CursorValue, encode_cursor
from .exceptions import InvalidPerPageError, MissingCursorColumnError
from .responses import CursorJSON, CursorPaginationLinks, CursorResponse

T = TypeVar("T")
U = TypeVar("U")

# A field name looked up on each item, or a projection returning the value.
CursorColumn = Union[str, Callable[[Any], Optional[CursorValue]]]

_UNSET: Any = object()


def cursor_value(item: Any, column: CursorColumn) -> Optional[CursorValue]:
    """Read the cursor column of ``item``.

    Mappings are indexed by key, other objects by attribute. A missing
    column yields ``None``.
    """
    if callable(column):
        return column(item)
    if isinstance(item, Mapping):
        return item.get(column)
    return getattr(item, column, None)


@dataclass(frozen=True)
class CursorPaginator(Generic[T]):
    """A page of items addressed by an opaque cursor instead of a page number.

    The caller fetches ``per_page + 1`` rows; the extra lookahead row only
    signals that a next page exists and is dropped from ``items``. No total
    count is computed, so deep pages cost the same as the first one.

    Example::

        rows = await repo.fetch_after(after, limit=11)
        paginator = CursorPaginator.create(rows, per_page=10, cursor_column="id")
        paginator.next_cursor  # cursor of rows[9], or None on the last page
    """

    items: tuple[T, ...]
    per_page: int
    cursor_column: CursorColumn
    has_more: bool
    next_cursor: Optional[str]
    prev_cursor: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def create(
        cls,
        items: Sequence[T],
        per_page: int,
        cursor_column: CursorColumn,
        prev_cursor: Optional[str] = None,
        path: Optional[str] = None,
    ) -> CursorPaginator[T]:
        """Build a paginator from a fetched batch.

        Args:
            items: fetched rows, ``per_page + 1`` of them when a next page exists
            per_page: page size
            cursor_column: column (or projection) the next cursor is taken from
            prev_cursor: cursor the current page was requested with
            path: base path for the links

        Raises:
            InvalidPerPageError: per_page < 1
            MissingCursorColumnError: cursor_column is empty
            InvalidCursorValueError: the last retained item has no cursor value
        """
        if per_page < 1:
            raise InvalidPerPageError(per_page)
        if cursor_column is None or cursor_column == "":
            raise MissingCursorColumnError()
        return cls._build(items, per_page, cursor_column, prev_cursor, path)

    @classmethod
    def _build(
        cls,
        items: Sequence[T],
        per_page: int,
        cursor_column: CursorColumn,
        prev_cursor: Optional[str],
        path: Optional[str],
        has_more: Optional[bool] = None,
        next_cursor: Optional[str] = _UNSET,
    ) -> CursorPaginator[T]:
        if has_more is None:
            has_more = len(items) > per_page
        data = tuple(items[:per_page]) if has_more else tuple(items)

        if next_cursor is _UNSET:
            next_cursor = None
            if has_more and data:
                next_cursor = encode_cursor(cursor_value(data[-1], cursor_column))

        return cls(
            items=data,
            per_page=per_page,
            cursor_column=cursor_column,
            has_more=has_more,
            next_cursor=next_cursor,
            prev_cursor=prev_cursor,
            path=path,
        )

    def has_more_pages(self) -> bool:
        return self.has_more

    def count(self) -> int:
        """Number of items on the current page."""
        return len(self.items)

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def is_not_empty(self) -> bool:
        return len(self.items) > 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def map(self, fn: Callable[[T, int], U]) -> CursorPaginator[U]:
        """Transform the items, keeping the cursors already computed.

        The transformed items may lack the cursor column entirely, so
        ``has_more`` and ``next_cursor`` are carried over rather than derived
        again.
        """
        return CursorPaginator._build(
            [fn(item, index) for index, item in enumerate(self.items)],
            per_page=self.per_page,
            cursor_column=self.cursor_column,
            prev_cursor=self.prev_cursor,
            path=self.path,
            has_more=self.has_more,
            next_cursor=self.next_cursor,
        )

    def get_links(self) -> CursorPaginationLinks:
        base = self.path or ""
        return {
            "first": base,
            "prev": f"{base}?cursor={self.prev_cursor}" if self.prev_cursor else None,
            "next": f"{base}?cursor={self.next_cursor}" if self.next_cursor else None,
        }

    def to_response(self) -> CursorResponse[T]:
        """API response form. ``meta`` never carries a total."""
        meta: dict[str, Any] = {
            "perPage": self.per_page,
            "nextCursor": self.next_cursor,
            "prevCursor": self.prev_cursor,
        }
        if self.path is not None:
            meta["path"] = self.path
        return {"data": list(self.items), "meta": meta}  # type: ignore[typeddict-item]

    def to_json(self) -> CursorJSON:
        result: dict[str, Any] = {
            "data": list(self.items),
            "perPage": self.per_page,
            "nextCursor": self.next_cursor,
            "prevCursor": self.prev_cursor,
        }
        if self.path is not None:
            result["path"] = self.path
        result["links"] = self.get_links()
        return result  # type: ignore[return-value]
