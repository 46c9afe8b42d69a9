"""Личный кабинет клиента: свои планы и журнал веса."""
from typing import List

from fastapi import APIRouter, Depends, status

from phinpt.core.dependencies import get_meal_plan_service, get_weight_service, get_workout_plan_service
from phinpt.core.errors import NotFoundError
from phinpt.core.rbac import require_client
from phinpt.models.user import User
from phinpt.models.workout import PlanAuthorEnum
from phinpt.schemas.meal import MealPlanRead
from phinpt.schemas.weight import WeightRecordCreate, WeightRecordRead, PortalWeightRecordCreate
from phinpt.schemas.workout import WorkoutPlanRead
from phinpt.services.meal_plan_service import MealPlanService
from phinpt.services.weight_service import WeightRecordService
from phinpt.services.workout_plan_service import WorkoutPlanService

router = APIRouter(tags=["portal"])


@router.get("/workout-plans", response_model=List[WorkoutPlanRead])
async def my_workout_plans(
    current_user: User = Depends(require_client),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.list_plans(client_id=current_user.id)


@router.post(
    "/workout-plans/{plan_id}/next-week",
    response_model=WorkoutPlanRead,
    status_code=status.HTTP_201_CREATED,
)
async def start_next_week(
    plan_id: str,
    current_user: User = Depends(require_client),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    """Клиент начинает новую неделю по своему плану-шаблону"""
    template = await service.get_plan(plan_id)
    # Чужой план не раскрываем даже фактом существования
    if template.client_id != current_user.id:
        raise NotFoundError("Không tìm thấy kế hoạch tập luyện")
    return await service.create_next_week_plan(current_user.id, plan_id, created_by=PlanAuthorEnum.client)


@router.get("/meal-plans", response_model=List[MealPlanRead])
async def my_meal_plans(
    current_user: User = Depends(require_client),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.list_plans(client_id=current_user.id)


@router.get("/weight-records", response_model=List[WeightRecordRead])
async def my_weight_records(
    current_user: User = Depends(require_client),
    service: WeightRecordService = Depends(get_weight_service),
):
    return await service.list_records(client_id=current_user.id)


@router.post("/weight-records", response_model=WeightRecordRead, status_code=status.HTTP_201_CREATED)
async def log_weight(
    data: PortalWeightRecordCreate,
    current_user: User = Depends(require_client),
    service: WeightRecordService = Depends(get_weight_service),
):
    record = WeightRecordCreate(client_id=current_user.id, **data.model_dump())
    return await service.add_record(record)
