"""CursorPaginator unit tests."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest
from kaname_paginator import (
    CursorPaginator,
    InvalidCursorValueError,
    InvalidPerPageError,
    MissingCursorColumnError,
    PaginationErrorCodes,
    decode_cursor,
    encode_cursor,
)


def _users(n: int) -> list[dict]:
    return [{"id": i, "name": f"user{i}"} for i in range(1, n + 1)]


@dataclasses.dataclass
class Post:
    id: int
    created_at: datetime


def test_lookahead_row_detects_next_page() -> None:
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id")
    assert paginator.count() == 5
    assert paginator.has_more is True
    assert paginator.has_more_pages() is True
    assert paginator.items[-1]["id"] == 5
    assert paginator.next_cursor == encode_cursor(5)


def test_exact_per_page_has_no_next_page() -> None:
    paginator = CursorPaginator.create(_users(5), per_page=5, cursor_column="id")
    assert paginator.count() == 5
    assert paginator.has_more_pages() is False
    assert paginator.next_cursor is None


def test_fewer_than_per_page() -> None:
    paginator = CursorPaginator.create(_users(3), per_page=5, cursor_column="id")
    assert paginator.count() == 3
    assert paginator.has_more_pages() is False
    assert paginator.next_cursor is None


def test_empty_page() -> None:
    paginator = CursorPaginator.create([], per_page=5, cursor_column="id")
    assert paginator.is_empty() is True
    assert paginator.is_not_empty() is False
    assert paginator.has_more_pages() is False
    assert paginator.next_cursor is None
    assert paginator.prev_cursor is None


def test_single_item_with_lookahead() -> None:
    paginator = CursorPaginator.create(_users(2), per_page=1, cursor_column="id")
    assert [u["id"] for u in paginator] == [1]
    assert decode_cursor(paginator.next_cursor) == "1"


def test_far_more_rows_than_per_page_are_trimmed() -> None:
    paginator = CursorPaginator.create(_users(1000), per_page=10, cursor_column="id")
    assert len(paginator) == 10
    assert decode_cursor(paginator.next_cursor) == "10"


def test_attribute_column() -> None:
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    posts = [Post(id=i, created_at=base + timedelta(days=i)) for i in range(4)]
    paginator = CursorPaginator.create(posts, per_page=3, cursor_column="created_at")
    assert decode_cursor(paginator.next_cursor) == posts[2].created_at.isoformat()


def test_projection_column() -> None:
    paginator = CursorPaginator.create(
        _users(4), per_page=3, cursor_column=lambda user: user["name"]
    )
    assert decode_cursor(paginator.next_cursor) == "user3"


def test_missing_cursor_value() -> None:
    rows = [{"id": 1}, {"name": "no-id"}, {"id": 3}]
    with pytest.raises(InvalidCursorValueError) as exc_info:
        CursorPaginator.create(rows, per_page=2, cursor_column="id")
    assert exc_info.value.code == PaginationErrorCodes.INVALID_CURSOR_VALUE


def test_missing_value_ignored_without_next_page() -> None:
    paginator = CursorPaginator.create([{"name": "no-id"}], per_page=2, cursor_column="id")
    assert paginator.next_cursor is None


def test_prev_cursor_is_stored() -> None:
    prev = encode_cursor(10)
    paginator = CursorPaginator.create(_users(3), per_page=5, cursor_column="id", prev_cursor=prev)
    assert paginator.prev_cursor == prev


def test_tuple_input() -> None:
    paginator = CursorPaginator.create(tuple(_users(6)), per_page=5, cursor_column="id")
    assert isinstance(paginator.items, tuple)
    assert paginator.count() == 5


def test_items_cannot_be_mutated() -> None:
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id")
    with pytest.raises(AttributeError):
        paginator.items.append({"id": 99})  # type: ignore[attr-defined]
    assert isinstance(paginator.to_json()["data"], list)
    assert paginator.count() == 5


def test_invalid_per_page() -> None:
    with pytest.raises(InvalidPerPageError) as exc_info:
        CursorPaginator.create(_users(1), per_page=0, cursor_column="id")
    assert exc_info.value.code == PaginationErrorCodes.INVALID_PER_PAGE


def test_missing_cursor_column() -> None:
    with pytest.raises(MissingCursorColumnError) as exc_info:
        CursorPaginator.create(_users(1), per_page=5, cursor_column="")
    assert exc_info.value.code == PaginationErrorCodes.MISSING_CURSOR_COLUMN


def test_is_frozen() -> None:
    paginator = CursorPaginator.create([], per_page=5, cursor_column="id")
    with pytest.raises(dataclasses.FrozenInstanceError):
        paginator.next_cursor = "x"  # type: ignore[misc]


def test_to_response_without_path() -> None:
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id")
    response = paginator.to_response()
    assert response["data"] == _users(5)
    assert response["meta"] == {
        "perPage": 5,
        "nextCursor": encode_cursor(5),
        "prevCursor": None,
    }
    assert "total" not in response["meta"]


def test_to_response_with_path() -> None:
    paginator = CursorPaginator.create(_users(2), per_page=5, cursor_column="id", path="/api/users")
    assert paginator.to_response()["meta"]["path"] == "/api/users"


def test_map_keeps_cursors() -> None:
    prev = encode_cursor(0)
    paginator = CursorPaginator.create(
        _users(6), per_page=5, cursor_column="id", prev_cursor=prev, path="/users"
    )
    names = paginator.map(lambda user, _: user["name"])
    assert names.items == ("user1", "user2", "user3", "user4", "user5")
    assert names.has_more_pages() is True
    assert names.next_cursor == paginator.next_cursor
    assert names.prev_cursor == prev
    assert names.path == "/users"
    assert names.per_page == 5


def test_map_without_next_page() -> None:
    paginator = CursorPaginator.create(_users(2), per_page=5, cursor_column="id")
    mapped = paginator.map(lambda user, _: {"label": user["name"]})
    assert mapped.has_more_pages() is False
    assert mapped.next_cursor is None


def test_map_passes_index() -> None:
    paginator = CursorPaginator.create(_users(3), per_page=5, cursor_column="id")
    assert paginator.map(lambda user, index: index).items == (0, 1, 2)


def test_map_identity_keeps_response() -> None:
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id", path="/u")
    assert paginator.map(lambda user, _: user).to_response() == paginator.to_response()


def test_links_without_path() -> None:
    prev = encode_cursor(0)
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id", prev_cursor=prev)
    assert paginator.get_links() == {
        "first": "",
        "prev": f"?cursor={prev}",
        "next": f"?cursor={encode_cursor(5)}",
    }


def test_links_with_path() -> None:
    prev = encode_cursor(0)
    paginator = CursorPaginator.create(
        _users(6), per_page=5, cursor_column="id", prev_cursor=prev, path="/api/users"
    )
    assert paginator.get_links() == {
        "first": "/api/users",
        "prev": f"/api/users?cursor={prev}",
        "next": f"/api/users?cursor={encode_cursor(5)}",
    }


def test_links_without_prev_cursor() -> None:
    paginator = CursorPaginator.create(_users(3), per_page=5, cursor_column="id", path="/u")
    assert paginator.get_links() == {"first": "/u", "prev": None, "next": None}


def test_to_json() -> None:
    paginator = CursorPaginator.create(_users(6), per_page=5, cursor_column="id", path="/u")
    assert paginator.to_json() == {
        "data": _users(5),
        "perPage": 5,
        "nextCursor": encode_cursor(5),
        "prevCursor": None,
        "path": "/u",
        "links": {"first": "/u", "prev": None, "next": f"/u?cursor={encode_cursor(5)}"},
    }


def test_size_invariants() -> None:
    for per_page in (1, 2, 5):
        for n in range(0, 8):
            paginator = CursorPaginator.create(_users(n), per_page=per_page, cursor_column="id")
            assert len(paginator) <= per_page
            assert paginator.has_more is (n > per_page)
            assert (paginator.next_cursor is not None) is (paginator.has_more and n > 0)
