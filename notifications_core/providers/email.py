"""メール通知ポート"""

from abc import ABC, abstractmethod

from notifications_core.dtos.email import EmailRequestDTO, EmailResponseDTO


class EmailProvider(ABC):
    """メール配信ポート（出力ポート）

    具体的な配信基盤（SendGrid, Resend, SMTP等）はアダプタとして実装する。
    サービス層はこのインターフェースのみに依存する。

    実装は複数のサービス呼び出しから同時に利用されるため、
    並行呼び出しに対して安全でなければならない。
    """

    @abstractmethod
    async def send_email(self, request: EmailRequestDTO) -> EmailResponseDTO:
        """メールを送信

        Args:
            request: 送信元・宛先・件名・本文を含むリクエスト

        Returns:
            配信ステータスとメッセージIDを含む応答。
            失敗時は失敗応答を返すか例外を送出する。
        """
        ...
