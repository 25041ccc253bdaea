"""SMS通知ポート"""

from abc import ABC, abstractmethod

from notifications_core.dtos.sms import SMSRequestDTO, SMSResponseDTO


class SMSProvider(ABC):
    """SMS配信ポート

    Twilio, AWS SNS, Vonage 等の連携はアダプタ側で実装する。
    電話番号形式などプロバイダ固有の検証もアダプタの責務。
    実装は並行呼び出しに対して安全であること。
    """

    @abstractmethod
    async def send_sms(self, request: SMSRequestDTO) -> SMSResponseDTO:
        """SMSを送信

        Args:
            request: 宛先電話番号と本文を含むリクエスト

        Returns:
            配信ステータスとメッセージIDを含む応答
        """
        ...
