"""Offset-based (length-aware) pagination."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import InvalidPageError, InvalidPerPageError, InvalidTotalError
from .responses import LengthAwareJSON, LengthAwareResponse, PaginationLinks

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class LengthAwarePaginator(Generic[T]):
    """A page of items together with the total record count.

    Build instances with :meth:`create`; ``last_page``, ``from_`` and ``to``
    are derived there and never change afterwards.

    Example::

        total, users = await asyncio.gather(repo.count(), repo.fetch(offset, 10))
        paginator = LengthAwarePaginator.create(users, total, per_page=10, current_page=3)
        return paginator.map(lambda user, _: user.to_dto()).to_response()
    """

    items: tuple[T, ...]
    total: int
    per_page: int
    current_page: int
    last_page: int
    from_: Optional[int]
    to: Optional[int]

    @classmethod
    def create(
        cls,
        items: Sequence[T],
        total: int,
        per_page: int,
        current_page: int,
    ) -> LengthAwarePaginator[T]:
        """Validate the page parameters and compute the page metadata.

        ``items`` is trusted to already be the slice for ``current_page``.

        Raises:
            InvalidPageError: current_page < 1
            InvalidPerPageError: per_page < 1
            InvalidTotalError: total < 0
        """
        if current_page < 1:
            raise InvalidPageError(current_page)
        if per_page < 1:
            raise InvalidPerPageError(per_page)
        if total < 0:
            raise InvalidTotalError(total)

        data = tuple(items)
        from_: Optional[int] = None
        to: Optional[int] = None
        if data:
            from_ = (current_page - 1) * per_page + 1
            # Capped by total rather than per_page so a partial last page is right.
            to = min(from_ + len(data) - 1, total)

        return cls(
            items=data,
            total=total,
            per_page=per_page,
            current_page=current_page,
            last_page=math.ceil(total / per_page),
            from_=from_,
            to=to,
        )

    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page

    def on_first_page(self) -> bool:
        return self.current_page == 1

    def on_last_page(self) -> bool:
        return self.current_page == self.last_page

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

    def map(self, fn: Callable[[T, int], U]) -> LengthAwarePaginator[U]:
        """Transform the items, keeping every pagination field.

        ``fn`` receives each item and its 0-based index within this page.
        """
        return LengthAwarePaginator.create(
            [fn(item, index) for index, item in enumerate(self.items)],
            total=self.total,
            per_page=self.per_page,
            current_page=self.current_page,
        )

    def get_links(self) -> PaginationLinks:
        return {
            "first": 1,
            "last": self.last_page,
            "prev": self.current_page - 1 if self.current_page > 1 else None,
            "next": self.current_page + 1 if self.has_more_pages() else None,
        }

    def to_response(self) -> LengthAwareResponse[T]:
        """API response form: items under ``data``, metadata under ``meta``."""
        return {
            "data": list(self.items),
            "meta": {
                "total": self.total,
                "perPage": self.per_page,
                "currentPage": self.current_page,
                "lastPage": self.last_page,
                "from": self.from_,
                "to": self.to,
            },
        }

    def to_json(self) -> LengthAwareJSON:
        """Flat form of :meth:`to_response` with the links added."""
        return {
            "data": list(self.items),
            "total": self.total,
            "perPage": self.per_page,
            "currentPage": self.current_page,
            "lastPage": self.last_page,
            "from": self.from_,
            "to": self.to,
            "links": self.get_links(),
        }
