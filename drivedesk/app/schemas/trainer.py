from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TrainerBase(BaseModel):
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    specialty: Optional[str] = None
    license_d_date: Optional[date] = None
    cin: Optional[str] = None
    license_types: List[str] = []
    picture_url: Optional[str] = None
    diploma_url: Optional[str] = None


class TrainerCreate(TrainerBase):
    office_id: Optional[int] = None
    hire_date: Optional[date] = None
    vehicle_ids: List[int] = []


class TrainerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    specialty: Optional[str] = None
    license_d_date: Optional[date] = None
    cin: Optional[str] = None
    license_types: Optional[List[str]] = None
    picture_url: Optional[str] = None
    diploma_url: Optional[str] = None
    vehicle_ids: Optional[List[int]] = None


class TrainerRead(TrainerBase):
    id: int
    office_id: int
    hire_date: date
    vehicle_ids: List[int] = []

    model_config = ConfigDict(from_attributes=True)
