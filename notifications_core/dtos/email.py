"""メール通知DTO"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from notifications_core.dtos.base import BaseResponseDTO
from notifications_core.enums import EmailStatusEnum


class EmailRequestDTO(BaseModel):
    """メール送信リクエスト

    送信元は外部表現に合わせて `from` エイリアスでも受け付ける。
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: str = Field(..., alias="from", min_length=1)
    to: list[str] = Field(..., min_length=1)
    subject: str = ""
    html: str | None = None
    text: str | None = None
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)
    reply_to: str | None = None

    @field_validator("to", "cc", "bcc", mode="before")
    @classmethod
    def _wrap_single_address(cls, v: Any) -> Any:
        """単一アドレス文字列をリストに変換"""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("to", "cc", "bcc")
    @classmethod
    def _reject_blank_recipients(cls, v: list[str]) -> list[str]:
        if any(not address.strip() for address in v):
            raise ValueError("空の宛先アドレスは指定できません")
        return v

    @model_validator(mode="after")
    def _require_body(self) -> "EmailRequestDTO":
        if not (self.html or "").strip() and not (self.text or "").strip():
            raise ValueError("html または text のいずれかが必要です")
        return self


class EmailResponseDTO(BaseResponseDTO):
    """メール送信結果"""

    status_enum: ClassVar[type[EmailStatusEnum]] = EmailStatusEnum

    status: EmailStatusEnum
