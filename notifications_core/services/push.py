"""プッシュ通知サービス"""

from typing import Any

from notifications_core.dtos.push import PushNotificationRequest, PushResponseDTO
from notifications_core.enums import NotificationChannel
from notifications_core.providers.push import PushProvider
from notifications_core.services.base import BaseNotificationService


class PushService(BaseNotificationService[PushProvider, PushNotificationRequest, PushResponseDTO]):
    """プッシュ通知サービス"""

    channel = NotificationChannel.PUSH
    provider_type = PushProvider
    request_type = PushNotificationRequest
    response_type = PushResponseDTO

    async def send_push(self, request: PushNotificationRequest | dict[str, Any]) -> PushResponseDTO:
        """プッシュ通知を送信"""
        validated = self._validate_request(request)
        return await self._deliver(validated, self._provider.send_push)
