"""インメモリ通知アダプタ — 開発・テスト用

実際の配信は行わず、受け付けたリクエストを記録して成功応答を返す。
"""

from uuid import uuid4

from loguru import logger

from notifications_core.dtos.email import EmailRequestDTO, EmailResponseDTO
from notifications_core.dtos.push import PushNotificationRequest, PushResponseDTO
from notifications_core.dtos.sms import SMSRequestDTO, SMSResponseDTO
from notifications_core.providers.email import EmailProvider
from notifications_core.providers.push import PushProvider
from notifications_core.providers.sms import SMSProvider


class InMemoryEmailProvider(EmailProvider):
    """メール送信を記録するだけのプロバイダ"""

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with  # 設定時は失敗応答を返す
        self.sent: list[EmailRequestDTO] = []

    async def send_email(self, request: EmailRequestDTO) -> EmailResponseDTO:
        if self.fail_with:
            return EmailResponseDTO.failed(self.fail_with)
        self.sent.append(request)
        logger.debug("InMemory Email記録: to={}, subject={}", request.to, request.subject)
        return EmailResponseDTO.sent(uuid4().hex)


class InMemorySMSProvider(SMSProvider):
    """SMS送信を記録するだけのプロバイダ"""

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.sent: list[SMSRequestDTO] = []

    async def send_sms(self, request: SMSRequestDTO) -> SMSResponseDTO:
        if self.fail_with:
            return SMSResponseDTO.failed(self.fail_with)
        self.sent.append(request)
        logger.debug("InMemory SMS記録: phone_number={}", request.phone_number)
        return SMSResponseDTO.sent(uuid4().hex)


class InMemoryPushProvider(PushProvider):
    """プッシュ通知を記録するだけのプロバイダ"""

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.sent: list[PushNotificationRequest] = []

    async def send_push(self, request: PushNotificationRequest) -> PushResponseDTO:
        if self.fail_with:
            return PushResponseDTO.failed(self.fail_with)
        self.sent.append(request)
        logger.debug("InMemory Push記録: title={}", request.title)
        return PushResponseDTO.sent(uuid4().hex)
