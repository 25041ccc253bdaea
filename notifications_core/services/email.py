"""メール通知サービス"""

from typing import Any

from notifications_core.dtos.email import EmailRequestDTO, EmailResponseDTO
from notifications_core.enums import NotificationChannel
from notifications_core.providers.email import EmailProvider
from notifications_core.services.base import BaseNotificationService


class EmailService(BaseNotificationService[EmailProvider, EmailRequestDTO, EmailResponseDTO]):
    """注入された EmailProvider へ委譲するメール送信サービス"""

    channel = NotificationChannel.EMAIL
    provider_type = EmailProvider
    request_type = EmailRequestDTO
    response_type = EmailResponseDTO

    async def send_email(self, request: EmailRequestDTO | dict[str, Any]) -> EmailResponseDTO:
        """メールを送信

        Raises:
            NotificationValidationError: リクエストが不正な場合（プロバイダ未呼び出し）
        """
        validated = self._validate_request(request)
        return await self._deliver(validated, self._provider.send_email)
