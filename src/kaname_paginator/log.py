"""structlog ベースのロガー"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .config import LogConfig

COMPONENT = "kaname_paginator"


def configure_logging(config: LogConfig | None = None) -> None:
    """stdlib logging と structlog を設定する。

    Args:
        config: ログ設定。省略時は INFO / json。
    """
    config = config or LogConfig()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.level.upper(), logging.INFO),
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.format == "json":
        processors += [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**context: Any) -> Any:
    """component を束縛した structlog ロガーを返す。"""
    return structlog.get_logger(COMPONENT).bind(component=COMPONENT, **context)
