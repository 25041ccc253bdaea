"""通知ステータス・チャネル定義"""

from enum import StrEnum


# ── 通知チャネル ──────────────────────────────────────
class NotificationChannel(StrEnum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


# ── 配信ステータス ────────────────────────────────────
# SENT のみが success=True に対応する
class EmailStatusEnum(StrEnum):
    SENT = "sent"
    FAILED = "failed"
    PENDING = "pending"  # プロバイダがキュー受付のみ応答した場合


class SMSStatusEnum(StrEnum):
    SENT = "sent"
    FAILED = "failed"
    PENDING = "pending"


class PushStatusEnum(StrEnum):
    SENT = "sent"
    FAILED = "failed"
    PENDING = "pending"
