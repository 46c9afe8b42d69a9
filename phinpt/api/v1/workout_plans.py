from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from phinpt.core.dependencies import get_workout_plan_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.models.workout import PlanAuthorEnum
from phinpt.schemas.workout import (
    WorkoutPlanCreate,
    WorkoutPlanUpdate,
    WorkoutPlanRead,
    DuplicatePlanRequest,
    NextWeekPlanRequest,
)
from phinpt.services.workout_plan_service import WorkoutPlanService

router = APIRouter(tags=["workout-plans"])


@router.get("", response_model=List[WorkoutPlanRead])
async def list_workout_plans(
    client_id: Optional[str] = Query(None),
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.list_plans(client_id=client_id)


@router.post("", response_model=WorkoutPlanRead, status_code=status.HTTP_201_CREATED)
async def add_workout_plan(
    data: WorkoutPlanCreate,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.create_plan(data)


# Объявлен до /{plan_id}, чтобы "next-week" не воспринимался как id
@router.post("/next-week", response_model=WorkoutPlanRead, status_code=status.HTTP_201_CREATED)
async def create_next_week_plan(
    data: NextWeekPlanRequest,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.create_next_week_plan(
        data.client_id, data.template_plan_id, created_by=PlanAuthorEnum.client
    )


@router.get("/{plan_id}", response_model=WorkoutPlanRead)
async def get_workout_plan(
    plan_id: str,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.get_plan(plan_id)


@router.put("/{plan_id}", response_model=WorkoutPlanRead)
async def update_workout_plan(
    plan_id: str,
    data: WorkoutPlanUpdate,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.update_plan(plan_id, data)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout_plan(
    plan_id: str,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    await service.delete_plan(plan_id)


@router.post("/{plan_id}/duplicate", response_model=WorkoutPlanRead, status_code=status.HTTP_201_CREATED)
async def duplicate_workout_plan(
    plan_id: str,
    data: DuplicatePlanRequest,
    current_user: User = Depends(require_admin),
    service: WorkoutPlanService = Depends(get_workout_plan_service),
):
    return await service.duplicate_plan(plan_id, data.client_id)
