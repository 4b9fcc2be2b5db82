from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class MessageRequest(BaseModel):
    device_token: str
    alert: Optional[str] = None
    action_loc_key: Optional[str] = None
    launch_image: Optional[str] = None
    loc_key: Optional[str] = None
    loc_args: list[Any] = Field(default_factory=list)
    badge: Optional[int] = None
    sound: Optional[str] = None
    payload: Optional[dict[str, Any]] = None
    expires_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_alert_style(self) -> "MessageRequest":
        if self.alert is not None and self.loc_key is not None:
            raise ValueError("alert and loc_key are mutually exclusive")
        return self


class SendResult(BaseModel):
    success: bool
    sender: str
    device_token: str
    payload_bytes: int
    timestamp: datetime
