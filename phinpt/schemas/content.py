from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class TestimonialCreate(BaseModel):
    name: str = Field(min_length=1)
    content: str = Field(min_length=1)
    rating: int = Field(default=5, ge=1, le=5)
    avatar: Optional[str] = None
    before_image: Optional[str] = None
    after_image: Optional[str] = None


class TestimonialUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    avatar: Optional[str] = None
    before_image: Optional[str] = None
    after_image: Optional[str] = None


class TestimonialRead(TestimonialCreate):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VideoCreate(BaseModel):
    title: str = Field(min_length=1)
    youtube_id: str = Field(min_length=1)
    description: str = ""
    category: str = Field(min_length=1)


class VideoUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    youtube_id: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)


class VideoRead(VideoCreate):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
