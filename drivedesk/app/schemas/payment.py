"""Payment schemas."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PaymentStatus = Literal["paid", "pending", "overdue"]
PaymentMethod = Literal["card", "cash", "transfer"]


class PaymentBase(BaseModel):
    student_id: int
    amount: Decimal = Field(gt=0, decimal_places=2)
    payment_date: Optional[date] = None
    status: PaymentStatus = "paid"
    method: PaymentMethod = "cash"


class PaymentCreate(PaymentBase):
    pass


class PaymentRead(PaymentBase):
    id: int
    payment_date: date

    model_config = ConfigDict(from_attributes=True)
