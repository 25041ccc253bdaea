"""通知DTO — リクエスト/応答の値オブジェクト"""

from notifications_core.dtos.base import BaseResponseDTO
from notifications_core.dtos.email import EmailRequestDTO, EmailResponseDTO
from notifications_core.dtos.push import PushNotificationRequest, PushResponseDTO
from notifications_core.dtos.sms import SMSRequestDTO, SMSResponseDTO

__all__ = [
    "BaseResponseDTO",
    "EmailRequestDTO",
    "EmailResponseDTO",
    "PushNotificationRequest",
    "PushResponseDTO",
    "SMSRequestDTO",
    "SMSResponseDTO",
]
