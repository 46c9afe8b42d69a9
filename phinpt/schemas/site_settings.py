from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class ContactInfoUpdate(BaseModel):
    phone: str
    facebook: str
    zalo: str
    email: str


class ContactInfoRead(ContactInfoUpdate):
    # None: строки в хранилище ещё нет, отдаются значения по умолчанию
    id: Optional[str] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HomeContentUpdate(BaseModel):
    hero_title: str = Field(min_length=1)
    hero_subtitle: str = Field(min_length=1)
    hero_image: Optional[str] = None
    about_text: str = Field(min_length=1)
    about_image: Optional[str] = None
    services_title: str = Field(min_length=1)
    services: List[str] = []


class HomeContentRead(HomeContentUpdate):
    id: Optional[str] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
