from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime

from phinpt.models.workout import PlanAuthorEnum


# --- Входные данные: порядок элементов в списке задаёт day_order / exercise_order / set_number ---

class ExerciseSetInput(BaseModel):
    id: Optional[str] = None
    reps: int = Field(default=0, ge=0)
    reality: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0)
    volume: Optional[float] = Field(default=None, ge=0)


class ExerciseInput(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    sets: List[ExerciseSetInput] = []


class WorkoutDayInput(BaseModel):
    id: Optional[str] = None
    day: str = Field(min_length=1)
    is_rest_day: bool = False
    exercises: List[ExerciseInput] = []


class WorkoutPlanCreate(BaseModel):
    name: str = Field(min_length=1)
    client_id: str
    week_number: int = Field(default=1, ge=1)
    start_date: Optional[date] = None
    created_by: PlanAuthorEnum = PlanAuthorEnum.admin
    days: List[WorkoutDayInput] = []


class WorkoutPlanUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    client_id: Optional[str] = None
    week_number: Optional[int] = Field(default=None, ge=1)
    start_date: Optional[date] = None
    # None: дерево дней не трогаем; список: синхронизируем по id
    days: Optional[List[WorkoutDayInput]] = None


class DuplicatePlanRequest(BaseModel):
    client_id: str


class NextWeekPlanRequest(BaseModel):
    client_id: str
    template_plan_id: str


# --- Представление для интерфейса ---

class ExerciseSetRead(BaseModel):
    id: str
    set: int
    reps: int
    reality: Optional[int] = None
    weight: Optional[float] = None
    volume: Optional[float] = None


class ExerciseRead(BaseModel):
    id: str
    name: str
    sets: List[ExerciseSetRead]


class WorkoutDayRead(BaseModel):
    id: str
    day: str
    is_rest_day: bool
    exercises: List[ExerciseRead]


class WorkoutPlanRead(BaseModel):
    id: str
    name: str
    client_id: str
    week_number: int
    start_date: date
    created_by: PlanAuthorEnum
    created_at: datetime
    updated_at: datetime
    days: List[WorkoutDayRead]
