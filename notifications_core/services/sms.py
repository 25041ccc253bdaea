"""SMS通知サービス"""

from typing import Any

from notifications_core.dtos.sms import SMSRequestDTO, SMSResponseDTO
from notifications_core.enums import NotificationChannel
from notifications_core.providers.sms import SMSProvider
from notifications_core.services.base import BaseNotificationService


class SMSService(BaseNotificationService[SMSProvider, SMSRequestDTO, SMSResponseDTO]):
    """SMS送信サービス"""

    channel = NotificationChannel.SMS
    provider_type = SMSProvider
    request_type = SMSRequestDTO
    response_type = SMSResponseDTO

    async def send_sms(self, request: SMSRequestDTO | dict[str, Any]) -> SMSResponseDTO:
        validated = self._validate_request(request)
        return await self._deliver(validated, self._provider.send_sms)
