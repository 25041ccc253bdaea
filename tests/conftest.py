"""共通テストフィクスチャ"""

import os
from typing import Any

import pytest

# テスト用に環境変数を設定
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("APP_LOG_LEVEL", "DEBUG")
os.environ.setdefault("EMAIL_PROVIDER", "memory")
os.environ.setdefault("SMS_PROVIDER", "memory")
os.environ.setdefault("PUSH_PROVIDER", "memory")


# ── リクエストフィクスチャ ────────────────────────────
@pytest.fixture
def email_request() -> Any:
    from notifications_core.dtos.email import EmailRequestDTO

    return EmailRequestDTO(
        sender="noreply@example.com",
        to=["user@example.com"],
        subject="Hello",
        text="Hi",
    )


@pytest.fixture
def sms_request() -> Any:
    from notifications_core.dtos.sms import SMSRequestDTO

    return SMSRequestDTO(phone_number="+15551234567", message="Your code is 123456")


@pytest.fixture
def push_request() -> Any:
    from notifications_core.dtos.push import PushNotificationRequest

    return PushNotificationRequest(
        token="abc123",
        title="Alert",
        body="Check now",
        data={"type": "alert"},
    )


# ── 設定キャッシュ リセット ──────────────────────────
@pytest.fixture(autouse=True)
def reset_settings_cache() -> Any:
    """テスト間でget_settingsのキャッシュをクリア"""
    from notifications_core.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ── ログシンク リセット ───────────────────────────────
@pytest.fixture(autouse=True)
def reset_log_sinks() -> Any:
    """setup_loggingで差し替えたシンクをテスト後に戻す"""
    import sys

    from loguru import logger

    yield
    logger.remove()
    logger.add(sys.stderr)
