from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class OfficeProfileUpdate(BaseModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None
    target_line: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    website: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    admin_name: Optional[str] = None


class OfficeProfileRead(BaseModel):
    office_id: int
    name: str
    logo_url: Optional[str] = None
    target_line: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    admin_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
