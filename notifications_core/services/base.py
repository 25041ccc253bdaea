"""通知サービス共通基盤 — プロバイダ呼び出しと失敗の正規化"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from notifications_core.dtos.base import BaseResponseDTO
from notifications_core.enums import NotificationChannel
from notifications_core.exceptions import NotificationValidationError, ProviderNotConfiguredError
from notifications_core.monitoring.metrics import (
    notification_send_duration_seconds,
    notifications_sent_total,
    provider_errors_total,
)

P = TypeVar("P")
Req = TypeVar("Req", bound=BaseModel)
Resp = TypeVar("Resp", bound=BaseResponseDTO)


def describe_error(error: BaseException) -> str:
    """例外から空でないエラー説明を生成"""
    return str(error) or type(error).__name__


class BaseNotificationService(Generic[P, Req, Resp]):
    """チャネル別サービスの基底クラス

    注入された単一プロバイダへ委譲し、プロバイダ側の失敗（失敗応答・例外）を
    すべて失敗応答に正規化する。呼び出し元へ送出するのはリクエスト不正のみ。

    サービス自体は状態を持たないため、同一インスタンスへの並行呼び出しは
    プロバイダが並行安全である限り安全。
    """

    channel: ClassVar[NotificationChannel]
    provider_type: ClassVar[type]
    request_type: ClassVar[type[BaseModel]]
    response_type: ClassVar[type[BaseResponseDTO]]

    def __init__(self, provider: P) -> None:
        if provider is None:
            raise ProviderNotConfiguredError(self.channel)
        if not isinstance(provider, self.provider_type):
            raise ProviderNotConfiguredError(
                self.channel,
                f"{type(provider).__name__} は {self.provider_type.__name__} を実装していません",
            )
        self._provider = provider

    @property
    def provider(self) -> P:
        return self._provider

    def _validate_request(self, request: Any) -> Req:
        """リクエスト型の検証（dictはDTOへ変換）"""
        if request is None:
            raise NotificationValidationError("リクエストが指定されていません", channel=self.channel)
        if isinstance(request, dict):
            try:
                return self.request_type.model_validate(request)  # type: ignore[return-value]
            except ValidationError as e:
                raise NotificationValidationError(
                    f"リクエスト検証エラー: {e.error_count()}件",
                    channel=self.channel,
                ) from e
        if not isinstance(request, self.request_type):
            raise NotificationValidationError(
                f"{self.request_type.__name__} が必要です（受信: {type(request).__name__}）",
                channel=self.channel,
            )
        return request  # type: ignore[return-value]

    async def _deliver(self, request: Req, send: Callable[[Req], Awaitable[Resp]]) -> Resp:
        """プロバイダを1回呼び出し、結果を応答に正規化

        CancelledError は Exception ではないため捕捉されず、そのまま伝播する。
        キャンセル要求中にアダプタが別の例外へ変換した場合もキャンセルとして扱う。
        """
        provider_name = type(self._provider).__name__
        started = time.monotonic()

        try:
            response = await send(request)
        except Exception as e:
            if (task := asyncio.current_task()) is not None and task.cancelling():
                raise asyncio.CancelledError from e
            provider_errors_total.labels(channel=self.channel, error_type=type(e).__name__).inc()
            logger.error(
                "通知送信エラー: channel={}, provider={}, error={}",
                self.channel,
                provider_name,
                describe_error(e),
            )
            response = self.response_type.failed(describe_error(e))  # type: ignore[assignment]
        else:
            if not isinstance(response, self.response_type):
                logger.error(
                    "不正なプロバイダ応答: channel={}, provider={}, type={}",
                    self.channel,
                    provider_name,
                    type(response).__name__,
                )
                response = self.response_type.failed(  # type: ignore[assignment]
                    f"プロバイダが不正な応答を返しました: {type(response).__name__}"
                )
        finally:
            notification_send_duration_seconds.labels(channel=self.channel).observe(time.monotonic() - started)

        notifications_sent_total.labels(channel=self.channel, status=response.status).inc()
        if response.success:
            logger.info(
                "通知送信成功: channel={}, provider={}, message_id={}",
                self.channel,
                provider_name,
                response.message_id,
            )
        else:
            logger.warning(
                "通知未完了: channel={}, provider={}, status={}, error={}",
                self.channel,
                provider_name,
                response.status,
                response.error_message,
            )
        return response
