"""Office schemas for DriveDesk."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

SubscriptionPlan = Literal["basic", "business", "enterprise"]


class OfficeCreate(BaseModel):
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    subscription_plan: SubscriptionPlan = "basic"


class OfficeRead(OfficeCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
