"""Opaque cursor encoding."""

from __future__ import annotations

import base64
import binascii
from datetime import date, datetime
from decimal import Decimal
from typing import Union
from uuid import UUID

from .exceptions import InvalidCursorFormatError, InvalidCursorValueError

CursorValue = Union[str, int, float, Decimal, UUID, date, datetime]


def cursor_string(value: CursorValue) -> str:
    """Return the string form a cursor value is encoded from."""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode_cursor(value: CursorValue | None) -> str:
    """Encode a cursor column value into a base64 cursor string."""
    if value is None:
        raise InvalidCursorValueError()
    return base64.b64encode(cursor_string(value).encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> str:
    """Decode a base64 cursor string back into the value's string form.

    The decoded text is re-encoded and compared with the input, so anything
    that is not a canonical encoding produced by :func:`encode_cursor` is
    rejected with :class:`InvalidCursorFormatError`. The caller re-parses the
    result into a number or datetime according to the cursor column's type.
    """
    if not isinstance(cursor, str) or not cursor:
        raise InvalidCursorFormatError()
    try:
        decoded = base64.b64decode(cursor, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidCursorFormatError(cause=e) from e
    if base64.b64encode(decoded.encode("utf-8")).decode("ascii") != cursor:
        raise InvalidCursorFormatError()
    return decoded
