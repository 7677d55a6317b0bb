"""Notification schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

NotificationType = Literal["completion", "payment_due"]


class NotificationCreate(BaseModel):
    student_id: int
    student_name: str
    office_id: Optional[int] = None
    message: str
    notification_type: NotificationType


class NotificationRead(NotificationCreate):
    id: int
    read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
