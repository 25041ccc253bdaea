"""プッシュ通知ポート"""

from abc import ABC, abstractmethod

from notifications_core.dtos.push import PushNotificationRequest, PushResponseDTO


class PushProvider(ABC):
    """プッシュ通知配信ポート（Firebase Cloud Messaging 等）

    実装は並行呼び出しに対して安全であること。
    """

    @abstractmethod
    async def send_push(self, request: PushNotificationRequest) -> PushResponseDTO:
        """デバイスへプッシュ通知を送信"""
        ...


# 旧名称
FirebaseProvider = PushProvider
