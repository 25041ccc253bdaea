"""応答DTO共通基盤 — ステータスとsuccessフラグの整合性を保証"""

from enum import StrEnum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, computed_field, model_validator


class BaseResponseDTO(BaseModel):
    """チャネル共通の応答DTO

    ステータス列挙が正であり、`success` はその射影。
    サブクラスは `status` フィールドと `status_enum` を定義する。
    """

    model_config = ConfigDict(frozen=True)

    status_enum: ClassVar[type[StrEnum]]

    message_id: str | None = None
    error_message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _reconcile_success_flag(cls, data: Any) -> Any:
        """success指定からステータスを導出し、矛盾を拒否"""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        enum = cls.status_enum
        success = data.pop("success", None)
        status = data.get("status")

        if status is None:
            if success is None:
                raise ValueError("status または success の指定が必要です")
            data["status"] = enum.SENT if success else enum.FAILED
            status = data["status"]
        elif success is not None and (enum(status) == enum.SENT) != bool(success):
            raise ValueError(f"success={success} と status={status} が矛盾しています")

        if enum(status) == enum.FAILED and not data.get("error_message"):
            raise ValueError("失敗応答には error_message が必要です")
        return data

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return self.status == self.status_enum.SENT  # type: ignore[attr-defined]

    @classmethod
    def sent(cls, message_id: str | None = None) -> Self:
        """送信成功応答"""
        return cls(status=cls.status_enum.SENT, message_id=message_id)

    @classmethod
    def failed(cls, error_message: str) -> Self:
        """送信失敗応答"""
        return cls(status=cls.status_enum.FAILED, error_message=error_message)

    @classmethod
    def pending(cls, message_id: str | None = None) -> Self:
        """キュー受付済み（配信未確認）応答"""
        return cls(status=cls.status_enum.PENDING, message_id=message_id)
