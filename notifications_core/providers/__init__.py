"""通知ポート — アダプタが実装する配信インターフェース"""

from notifications_core.providers.email import EmailProvider
from notifications_core.providers.push import FirebaseProvider, PushProvider
from notifications_core.providers.sms import SMSProvider

__all__ = [
    "EmailProvider",
    "FirebaseProvider",
    "PushProvider",
    "SMSProvider",
]
