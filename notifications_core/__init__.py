"""通知基盤 — Email / SMS / Push のポートと委譲サービス"""

from notifications_core.dtos import (
    EmailRequestDTO,
    EmailResponseDTO,
    PushNotificationRequest,
    PushResponseDTO,
    SMSRequestDTO,
    SMSResponseDTO,
)
from notifications_core.enums import EmailStatusEnum, NotificationChannel, PushStatusEnum, SMSStatusEnum
from notifications_core.exceptions import (
    NotificationError,
    NotificationValidationError,
    ProviderNotConfiguredError,
)
from notifications_core.providers import EmailProvider, FirebaseProvider, PushProvider, SMSProvider
from notifications_core.services import EmailService, PushService, SMSService

__all__ = [
    "EmailProvider",
    "EmailRequestDTO",
    "EmailResponseDTO",
    "EmailService",
    "EmailStatusEnum",
    "FirebaseProvider",
    "NotificationChannel",
    "NotificationError",
    "NotificationValidationError",
    "ProviderNotConfiguredError",
    "PushNotificationRequest",
    "PushProvider",
    "PushResponseDTO",
    "PushService",
    "PushStatusEnum",
    "SMSProvider",
    "SMSRequestDTO",
    "SMSResponseDTO",
    "SMSService",
    "SMSStatusEnum",
]
