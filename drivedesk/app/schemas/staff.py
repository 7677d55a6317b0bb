from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

SalaryType = Literal["monthly", "hourly", "task_based"]
PresenceStatus = Literal["present", "absent"]


class StaffBase(BaseModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    cin: Optional[str] = None
    address: Optional[str] = None
    salary_type: SalaryType = "monthly"
    salary_amount: Decimal = Field(default=Decimal("0.00"), ge=0, decimal_places=2)
    picture_url: Optional[str] = None


class StaffCreate(StaffBase):
    office_id: Optional[int] = None
    hire_date: Optional[date] = None


class StaffUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    cin: Optional[str] = None
    address: Optional[str] = None
    salary_type: Optional[SalaryType] = None
    salary_amount: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    picture_url: Optional[str] = None
    status: Optional[PresenceStatus] = None


class StaffRead(StaffBase):
    id: int
    office_id: int
    hire_date: date
    status: PresenceStatus

    model_config = ConfigDict(from_attributes=True)
