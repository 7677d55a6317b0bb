from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PlanDuration = Literal["monthly", "yearly"]


class SubscriptionPlanUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    duration: Optional[PlanDuration] = None
    features: Optional[List[str]] = None


class SubscriptionPlanRead(BaseModel):
    id: int
    code: str
    name: str
    price: Decimal
    duration: str
    features: List[str]

    model_config = ConfigDict(from_attributes=True)
