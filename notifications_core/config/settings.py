"""アプリケーション設定 — pydantic-settings ベース"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from notifications_core.enums import NotificationChannel


class Settings(BaseSettings):
    """全環境変数を型安全に管理"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ───────────────────────────────────
    app_name: str = "notifications-core"
    app_env: str = "development"
    app_log_level: str = "INFO"
    log_json_output: bool = False

    # ── Providers ─────────────────────────────────────
    # レジストリ登録名。空文字ならチャネル無効
    email_provider: str = "memory"
    sms_provider: str = "memory"
    push_provider: str = "memory"

    def provider_name_for(self, channel: NotificationChannel) -> str:
        """チャネルに設定されたプロバイダ名"""
        return {
            NotificationChannel.EMAIL: self.email_provider,
            NotificationChannel.SMS: self.sms_provider,
            NotificationChannel.PUSH: self.push_provider,
        }[channel].strip()

    @property
    def enabled_channels(self) -> list[NotificationChannel]:
        return [channel for channel in NotificationChannel if self.provider_name_for(channel)]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定シングルトンを返す"""
    return Settings()
