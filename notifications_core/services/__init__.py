"""通知サービス — チャネル別の委譲サービス"""

from notifications_core.services.base import BaseNotificationService
from notifications_core.services.email import EmailService
from notifications_core.services.push import PushService
from notifications_core.services.sms import SMSService

__all__ = [
    "BaseNotificationService",
    "EmailService",
    "PushService",
    "SMSService",
]
