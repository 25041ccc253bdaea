"""通知基盤の例外定義"""


class NotificationError(Exception):
    """通知基盤の基底例外"""


class NotificationValidationError(NotificationError, ValueError):
    """リクエスト不正 — プロバイダ呼び出し前に送出"""

    def __init__(self, message: str, channel: str = "") -> None:
        super().__init__(message)
        self.channel = channel


class ProviderNotConfiguredError(NotificationError):
    """プロバイダ未設定 — 起動時の構成エラー"""

    def __init__(self, channel: str, detail: str = "") -> None:
        message = f"通知プロバイダ未設定: {channel}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.channel = channel
