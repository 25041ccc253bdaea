"""構造化ログ設定 — loguru + JSON形式"""

import sys
from contextvars import ContextVar
from typing import Any

import orjson
from loguru import logger

from notifications_core.config.settings import Settings

# 呼び出し元の相関IDを保持
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def _serialize(record: dict[str, Any]) -> str:
    """ログレコードをJSON文字列に変換"""
    log_entry = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
        "correlation_id": correlation_id_var.get(""),
    }

    # extra フィールド（channel, provider 等）
    if record.get("extra"):
        for key, value in record["extra"].items():
            if key not in ("correlation_id", "serialized"):
                log_entry[key] = value

    if record["exception"]:
        log_entry["exception"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else None,
            "value": str(record["exception"].value) if record["exception"].value else None,
        }

    return orjson.dumps(log_entry, default=str).decode()


def _json_formatter(record: dict[str, Any]) -> str:
    """JSON構造化ログフォーマッタ

    戻り値はloguruがテンプレート兼マークアップとして解釈するため、
    JSON本体は extra 経由で埋め込む。
    """
    record["extra"]["serialized"] = _serialize(record)
    return "{extra[serialized]}\n"


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """ログ設定を初期化

    Args:
        level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON形式で出力するか（本番=True, 開発=False）
    """
    logger.remove()

    if json_output:
        logger.add(sys.stdout, format=_json_formatter, level=level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            level=level,
            colorize=True,
        )

    logger.info("ログ設定初期化完了: level={}, json_output={}", level, json_output)


def configure_logging(settings: Settings) -> None:
    """設定値に従ってログを初期化"""
    setup_logging(level=settings.app_log_level.upper(), json_output=settings.log_json_output)
