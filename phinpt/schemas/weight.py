from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as date_type, datetime


class WeightRecordCreate(BaseModel):
    client_id: str
    weight: float = Field(gt=0, le=500)
    date: date_type
    notes: Optional[str] = None


class PortalWeightRecordCreate(BaseModel):
    weight: float = Field(gt=0, le=500)
    date: date_type
    notes: Optional[str] = None


class WeightRecordRead(BaseModel):
    id: str
    client_id: str
    weight: float
    date: date_type
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
