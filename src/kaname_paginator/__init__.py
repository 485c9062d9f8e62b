"""kaname paginator library."""

from .codec import CursorValue, encode_cursor
from .config import CursorConfig, LogConfig, PagesConfig, PaginatorConfig, load_config
from .cursor_paginator import CursorColumn, CursorPaginator
from .exceptions import (
    ConfigError,
    InvalidCursorFormatError,
    InvalidCursorValueError,
    InvalidPageError,
    InvalidPerPageError,
    InvalidTotalError,
    MissingCursorColumnError,
    PaginationError,
    PaginationErrorCodes,
)
from .length_aware import LengthAwarePaginator
from .log import configure_logging, get_logger
from .paginator import (
    cursor,
    decode_cursor,
    is_cursor_response,
    is_length_aware_response,
    length_aware,
)
from .responses import (
    CursorJSON,
    CursorMeta,
    CursorPaginationLinks,
    CursorResponse,
    LengthAwareJSON,
    LengthAwareMeta,
    LengthAwareResponse,
    PaginationLinks,
)
from .source import CursorSource, InMemorySource, PageSource, with_cursor, with_pages

__all__ = [
    "LengthAwarePaginator",
    "CursorPaginator",
    "CursorColumn",
    "CursorValue",
    "length_aware",
    "cursor",
    "decode_cursor",
    "encode_cursor",
    "is_length_aware_response",
    "is_cursor_response",
    "PaginationLinks",
    "LengthAwareMeta",
    "LengthAwareResponse",
    "LengthAwareJSON",
    "CursorPaginationLinks",
    "CursorMeta",
    "CursorResponse",
    "CursorJSON",
    "PageSource",
    "CursorSource",
    "InMemorySource",
    "with_pages",
    "with_cursor",
    "PagesConfig",
    "CursorConfig",
    "LogConfig",
    "PaginatorConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "PaginationError",
    "PaginationErrorCodes",
    "InvalidPageError",
    "InvalidPerPageError",
    "InvalidTotalError",
    "MissingCursorColumnError",
    "InvalidCursorValueError",
    "InvalidCursorFormatError",
    "ConfigError",
]
