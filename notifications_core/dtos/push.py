"""プッシュ通知DTO"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from notifications_core.dtos.base import BaseResponseDTO
from notifications_core.enums import PushStatusEnum


class PushNotificationRequest(BaseModel):
    """プッシュ通知リクエスト"""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1)  # デバイストークン
    title: str = ""
    body: str = ""
    data: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("デバイストークンが空です")
        return v


class PushResponseDTO(BaseResponseDTO):
    """プッシュ通知送信結果"""

    status_enum: ClassVar[type[PushStatusEnum]] = PushStatusEnum

    status: PushStatusEnum
