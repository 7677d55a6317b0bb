from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr

UserRole = Literal["superadmin", "admin", "secretary"]


class SecretaryCreate(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None
    office_id: int


class AdminCreate(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None
    office_id: Optional[int] = None


class UserRead(BaseModel):
    id: int
    email: EmailStr
    full_name: Optional[str] = None
    role: UserRole
    office_id: Optional[int] = None
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
