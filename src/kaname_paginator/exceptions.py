"""paginator ライブラリの例外型定義"""

from __future__ import annotations


class PaginationError(Exception):
    """paginator ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PaginationErrorCodes:
    """PaginationError のエラーコード定数。"""

    INVALID_PAGE: str = "INVALID_PAGE"
    INVALID_PER_PAGE: str = "INVALID_PER_PAGE"
    INVALID_TOTAL: str = "INVALID_TOTAL"
    MISSING_CURSOR_COLUMN: str = "MISSING_CURSOR_COLUMN"
    INVALID_CURSOR_VALUE: str = "INVALID_CURSOR_VALUE"
    INVALID_CURSOR_FORMAT: str = "INVALID_CURSOR_FORMAT"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class InvalidPageError(PaginationError, ValueError):
    """current_page が 1 未満。"""

    def __init__(self, value: int) -> None:
        super().__init__(
            PaginationErrorCodes.INVALID_PAGE,
            f"current page must be at least 1, got {value}",
        )
        self.value = value


class InvalidPerPageError(PaginationError, ValueError):
    """per_page が 1 未満。"""

    def __init__(self, value: int) -> None:
        super().__init__(
            PaginationErrorCodes.INVALID_PER_PAGE,
            f"per page must be at least 1, got {value}",
        )
        self.value = value


class InvalidTotalError(PaginationError, ValueError):
    """total が負数。"""

    def __init__(self, value: int) -> None:
        super().__init__(
            PaginationErrorCodes.INVALID_TOTAL,
            f"total must be non-negative, got {value}",
        )
        self.value = value


class MissingCursorColumnError(PaginationError, ValueError):
    """cursor_column が未指定。"""

    def __init__(self) -> None:
        super().__init__(
            PaginationErrorCodes.MISSING_CURSOR_COLUMN,
            "cursor column is required",
        )


class InvalidCursorValueError(PaginationError, ValueError):
    """カーソルに変換できない値（None）。"""

    def __init__(self) -> None:
        super().__init__(
            PaginationErrorCodes.INVALID_CURSOR_VALUE,
            "cursor value cannot be None",
        )


class InvalidCursorFormatError(PaginationError, ValueError):
    """デコードできないカーソル文字列。"""

    def __init__(self, cause: Exception | None = None) -> None:
        super().__init__(
            PaginationErrorCodes.INVALID_CURSOR_FORMAT,
            "invalid cursor format",
            cause=cause,
        )


class ConfigError(PaginationError):
    """設定ファイルの読み込み・検証エラー。"""
