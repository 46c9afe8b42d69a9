from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import date, datetime

from phinpt.models.user import RoleEnum


class UserRead(BaseModel):
    id: str
    username: str
    email: str
    full_name: str
    phone: Optional[str] = None
    role: RoleEnum
    is_admin: bool
    avatar: Optional[str] = None
    start_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    phone: Optional[str] = None
    role: RoleEnum = RoleEnum.client
    avatar: Optional[str] = None
    start_date: Optional[date] = None


class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    # Пустое значение: пароль не меняется
    password: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[RoleEnum] = None
    avatar: Optional[str] = None
    start_date: Optional[date] = None
