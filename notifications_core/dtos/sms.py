"""SMS通知DTO"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from notifications_core.dtos.base import BaseResponseDTO
from notifications_core.enums import SMSStatusEnum


class SMSRequestDTO(BaseModel):
    """SMS送信リクエスト"""

    model_config = ConfigDict(frozen=True)

    phone_number: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    sender_id: str | None = None  # 送信者名/番号（プロバイダ依存）

    @field_validator("phone_number", "message")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("空白のみの値は指定できません")
        return v


class SMSResponseDTO(BaseResponseDTO):
    """SMS送信結果"""

    status_enum: ClassVar[type[SMSStatusEnum]] = SMSStatusEnum

    status: SMSStatusEnum
