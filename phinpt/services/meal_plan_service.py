import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from phinpt.core.errors import NotFoundError, PreconditionError, store_operation
from phinpt.models.meal import MealPlan, Meal, MealFood
from phinpt.models.user import User
from phinpt.schemas.meal import (
    MealPlanCreate,
    MealPlanUpdate,
    MealPlanRead,
    MealRead,
    MealInput,
    MealFoodRead,
    MealFoodInput,
)
from phinpt.services.nested_sync import sync_ordered

logger = logging.getLogger(__name__)


def plan_tree_query():
    return select(MealPlan).options(joinedload(MealPlan.meals).joinedload(Meal.foods))


def build_plan_view(plan: MealPlan) -> MealPlanRead:
    return MealPlanRead(
        id=plan.id,
        name=plan.name,
        client_id=plan.client_id,
        total_calories=plan.total_calories,
        notes=plan.notes,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
        meals=[
            MealRead(
                id=meal.id,
                name=meal.name,
                total_calories=meal.total_calories,
                foods=[
                    MealFoodRead(
                        id=food.id,
                        name=food.name,
                        macro_type=food.macro_type,
                        calories=food.calories,
                        notes=food.notes,
                    )
                    for food in meal.foods
                ],
            )
            for meal in plan.meals
        ],
    )


def _apply_food(food: MealFood, data: MealFoodInput) -> None:
    food.name = data.name
    food.macro_type = data.macro_type
    food.calories = data.calories
    food.notes = data.notes


def _apply_meal(meal: Meal, data: MealInput) -> None:
    meal.name = data.name
    meal.total_calories = data.total_calories
    meal.foods = sync_ordered(meal.foods, data.foods, MealFood, _apply_food, "food_order")


class MealPlanService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_client(self, client_id: str) -> None:
        async with store_operation(self.db, "проверка клиента"):
            client = await self.db.get(User, client_id)
        if client is None:
            raise PreconditionError(f"Không tìm thấy khách hàng {client_id}")

    async def _load_plan(self, plan_id: str) -> MealPlan:
        async with store_operation(self.db, "загрузка плана питания"):
            result = await self.db.execute(
                plan_tree_query()
                .where(MealPlan.id == plan_id)
                .execution_options(populate_existing=True)
            )
            plan = result.unique().scalar_one_or_none()
        if plan is None:
            raise NotFoundError("Không tìm thấy thực đơn")
        return plan

    async def list_plans(self, client_id: Optional[str] = None) -> List[MealPlanRead]:
        query = plan_tree_query().order_by(MealPlan.created_at.desc())
        if client_id is not None:
            query = query.where(MealPlan.client_id == client_id)

        async with store_operation(self.db, "загрузка планов питания"):
            result = await self.db.execute(query.execution_options(populate_existing=True))
            plans = result.unique().scalars().all()
        return [build_plan_view(plan) for plan in plans]

    async def get_plan(self, plan_id: str) -> MealPlanRead:
        return build_plan_view(await self._load_plan(plan_id))

    async def create_plan(self, data: MealPlanCreate) -> MealPlanRead:
        await self._ensure_client(data.client_id)

        plan = MealPlan(
            name=data.name,
            client_id=data.client_id,
            total_calories=data.total_calories,
            notes=data.notes,
        )
        plan.meals = sync_ordered([], data.meals, Meal, _apply_meal, "meal_order")

        async with store_operation(self.db, "добавление плана питания"):
            self.db.add(plan)
            await self.db.commit()

        logger.info(f"Создан план питания {plan.id} для клиента {plan.client_id}")
        return await self.get_plan(plan.id)

    async def update_plan(self, plan_id: str, data: MealPlanUpdate) -> MealPlanRead:
        plan = await self._load_plan(plan_id)

        fields = data.model_dump(exclude_unset=True, exclude={"meals"})
        # notes можно очистить явным null, остальные поля обязательны
        fields = {k: v for k, v in fields.items() if v is not None or k == "notes"}
        if "client_id" in fields and fields["client_id"] != plan.client_id:
            await self._ensure_client(fields["client_id"])

        async with store_operation(self.db, "обновление плана питания"):
            for key, value in fields.items():
                setattr(plan, key, value)
            if data.meals is not None:
                plan.meals = sync_ordered(plan.meals, data.meals, Meal, _apply_meal, "meal_order")
            plan.updated_at = datetime.utcnow()
            await self.db.commit()

        return await self.get_plan(plan_id)

    async def delete_plan(self, plan_id: str) -> None:
        async with store_operation(self.db, "удаление плана питания"):
            plan = await self.db.get(MealPlan, plan_id)
            if plan is None:
                raise NotFoundError("Không tìm thấy thực đơn")
            await self.db.delete(plan)
            await self.db.commit()
        logger.info(f"Удалён план питания {plan_id}")
