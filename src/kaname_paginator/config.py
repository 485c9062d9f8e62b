"""ページネーション設定（pydantic BaseModel）と YAML ローダー"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, PaginationErrorCodes
from .merger import merge_layers


class PagesConfig(BaseModel):
    """オフセットページネーションの既定値。"""

    limit: int = Field(default=10, ge=1)
    include_page_count: bool = True


class CursorConfig(BaseModel):
    """カーソルページネーションの既定値。"""

    limit: int = Field(default=10, ge=1)
    cursor_column: str = Field(default="id", min_length=1)


class LogConfig(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class PaginatorConfig(BaseModel):
    """paginator 設定全体。"""

    pages: PagesConfig = Field(default_factory=PagesConfig)
    cursor: CursorConfig = Field(default_factory=CursorConfig)
    log: LogConfig = Field(default_factory=LogConfig)


def _load_layer(path: Path) -> dict[str, Any]:
    """1 つの YAML ファイルを設定レイヤー（辞書）として読み込む。"""
    try:
        with path.open(encoding="utf-8") as stream:
            layer = yaml.safe_load(stream)
    except OSError as e:
        raise ConfigError(
            code=PaginationErrorCodes.READ_FILE,
            message=f"Cannot open config file {path}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            code=PaginationErrorCodes.PARSE_YAML,
            message=f"Invalid YAML in {path}",
            cause=e,
        ) from e
    if layer is None:
        return {}
    if not isinstance(layer, dict):
        raise ConfigError(
            code=PaginationErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return layer


def load_config(base_path: Path, env_path: Path | None = None) -> PaginatorConfig:
    """設定ファイルを読み込んで PaginatorConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースの上に重ねる。
    """
    layers = [_load_layer(base_path)]
    if env_path is not None and env_path.exists():
        layers.append(_load_layer(env_path))
    try:
        return PaginatorConfig.model_validate(merge_layers(*layers))
    except ValidationError as e:
        raise ConfigError(
            code=PaginationErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
