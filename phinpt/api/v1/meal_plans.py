from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from phinpt.core.dependencies import get_meal_plan_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.schemas.meal import MealPlanCreate, MealPlanUpdate, MealPlanRead
from phinpt.services.meal_plan_service import MealPlanService

router = APIRouter(tags=["meal-plans"])


@router.get("", response_model=List[MealPlanRead])
async def list_meal_plans(
    client_id: Optional[str] = Query(None),
    current_user: User = Depends(require_admin),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.list_plans(client_id=client_id)


@router.post("", response_model=MealPlanRead, status_code=status.HTTP_201_CREATED)
async def add_meal_plan(
    data: MealPlanCreate,
    current_user: User = Depends(require_admin),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.create_plan(data)


@router.get("/{plan_id}", response_model=MealPlanRead)
async def get_meal_plan(
    plan_id: str,
    current_user: User = Depends(require_admin),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.get_plan(plan_id)


@router.put("/{plan_id}", response_model=MealPlanRead)
async def update_meal_plan(
    plan_id: str,
    data: MealPlanUpdate,
    current_user: User = Depends(require_admin),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.update_plan(plan_id, data)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal_plan(
    plan_id: str,
    current_user: User = Depends(require_admin),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    await service.delete_plan(plan_id)
