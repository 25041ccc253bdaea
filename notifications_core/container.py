"""コンポジションルート — 設定に基づくプロバイダ解決とサービス生成

チャネルごとにプロバイダファクトリを名前で登録し、設定で選択された
1つのプロバイダを各サービスへ注入する。未設定・未登録は起動時エラー。
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from notifications_core.adapters.memory import (
    InMemoryEmailProvider,
    InMemoryPushProvider,
    InMemorySMSProvider,
)
from notifications_core.config.settings import Settings, get_settings
from notifications_core.enums import NotificationChannel
from notifications_core.exceptions import ProviderNotConfiguredError
from notifications_core.monitoring.logging import configure_logging
from notifications_core.services.base import BaseNotificationService
from notifications_core.services.email import EmailService
from notifications_core.services.push import PushService
from notifications_core.services.sms import SMSService

ProviderFactory = Callable[[Settings], Any]

_SERVICE_TYPES: dict[NotificationChannel, type[BaseNotificationService[Any, Any, Any]]] = {
    NotificationChannel.EMAIL: EmailService,
    NotificationChannel.SMS: SMSService,
    NotificationChannel.PUSH: PushService,
}


class NotificationContainer:
    """通知サービスのDIコンテナ"""

    def __init__(self, settings: Settings | None = None, setup_logs: bool = True) -> None:
        self._settings = settings or get_settings()
        if setup_logs:
            configure_logging(self._settings)
        self._factories: dict[NotificationChannel, dict[str, ProviderFactory]] = {
            channel: {} for channel in NotificationChannel
        }
        self._services: dict[NotificationChannel, BaseNotificationService[Any, Any, Any]] = {}

        self.register_provider(NotificationChannel.EMAIL, "memory", lambda _: InMemoryEmailProvider())
        self.register_provider(NotificationChannel.SMS, "memory", lambda _: InMemorySMSProvider())
        self.register_provider(NotificationChannel.PUSH, "memory", lambda _: InMemoryPushProvider())

    @property
    def settings(self) -> Settings:
        return self._settings

    def register_provider(self, channel: NotificationChannel, name: str, factory: ProviderFactory) -> None:
        """プロバイダファクトリを登録"""
        self._factories[channel][name] = factory
        # 生成済みサービスは次回取得時に作り直す
        self._services.pop(channel, None)
        logger.info("通知プロバイダ登録: channel={}, name={}", channel, name)

    def list_providers(self, channel: NotificationChannel) -> list[str]:
        """登録済みプロバイダ名一覧"""
        return list(self._factories[channel].keys())

    def _resolve(self, channel: NotificationChannel) -> BaseNotificationService[Any, Any, Any]:
        service = self._services.get(channel)
        if service is not None:
            return service

        name = self._settings.provider_name_for(channel)
        if not name:
            raise ProviderNotConfiguredError(channel, "プロバイダ名が未設定")
        factory = self._factories[channel].get(name)
        if factory is None:
            raise ProviderNotConfiguredError(channel, f"未登録のプロバイダ '{name}'")

        service = _SERVICE_TYPES[channel](factory(self._settings))
        self._services[channel] = service
        logger.info("通知サービス生成: channel={}, provider={}", channel, name)
        return service

    def email_service(self) -> EmailService:
        return self._resolve(NotificationChannel.EMAIL)  # type: ignore[return-value]

    def sms_service(self) -> SMSService:
        return self._resolve(NotificationChannel.SMS)  # type: ignore[return-value]

    def push_service(self) -> PushService:
        return self._resolve(NotificationChannel.PUSH)  # type: ignore[return-value]

    def validate(self) -> None:
        """有効な全チャネルのサービスを生成し、構成エラーを起動時に検出"""
        for channel in self._settings.enabled_channels:
            self._resolve(channel)
