from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from phinpt.models.meal import MacroTypeEnum


class MealFoodInput(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    macro_type: MacroTypeEnum
    calories: int = Field(default=0, ge=0)
    notes: Optional[str] = None


class MealInput(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    total_calories: int = Field(default=0, ge=0)
    foods: List[MealFoodInput] = []


class MealPlanCreate(BaseModel):
    name: str = Field(min_length=1)
    client_id: str
    total_calories: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    meals: List[MealInput] = []


class MealPlanUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    client_id: Optional[str] = None
    total_calories: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    meals: Optional[List[MealInput]] = None


class MealFoodRead(BaseModel):
    id: str
    name: str
    macro_type: MacroTypeEnum
    calories: int
    notes: Optional[str] = None


class MealRead(BaseModel):
    id: str
    name: str
    total_calories: int
    foods: List[MealFoodRead]


class MealPlanRead(BaseModel):
    id: str
    name: str
    client_id: str
    total_calories: int
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    meals: List[MealRead]
