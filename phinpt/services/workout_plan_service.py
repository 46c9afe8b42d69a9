import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from phinpt.core.errors import NotFoundError, PreconditionError, store_operation
from phinpt.models.user import User
from phinpt.models.workout import WorkoutPlan, WorkoutDay, Exercise, ExerciseSet, PlanAuthorEnum
from phinpt.schemas.workout import (
    WorkoutPlanCreate,
    WorkoutPlanUpdate,
    WorkoutPlanRead,
    WorkoutDayRead,
    WorkoutDayInput,
    ExerciseRead,
    ExerciseInput,
    ExerciseSetRead,
    ExerciseSetInput,
)
from phinpt.services.nested_sync import sync_ordered

logger = logging.getLogger(__name__)


# ==========================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# ==========================

def plan_tree_query():
    """План со всем деревом дней/упражнений/подходов: один запрос с JOIN."""
    return select(WorkoutPlan).options(
        joinedload(WorkoutPlan.days)
        .joinedload(WorkoutDay.exercises)
        .joinedload(Exercise.sets)
    )


def build_plan_view(plan: WorkoutPlan) -> WorkoutPlanRead:
    return WorkoutPlanRead(
        id=plan.id,
        name=plan.name,
        client_id=plan.client_id,
        week_number=plan.week_number,
        start_date=plan.start_date,
        created_by=plan.created_by,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
        days=[
            WorkoutDayRead(
                id=day.id,
                day=day.day_name,
                is_rest_day=day.is_rest_day,
                exercises=[
                    ExerciseRead(
                        id=exercise.id,
                        name=exercise.name,
                        sets=[
                            ExerciseSetRead(
                                id=s.id,
                                set=s.set_number,
                                reps=s.reps,
                                reality=s.reality,
                                weight=s.weight,
                                volume=s.volume,
                            )
                            for s in exercise.sets
                        ],
                    )
                    for exercise in day.exercises
                ],
            )
            for day in plan.days
        ],
    )


def _apply_set(exercise_set: ExerciseSet, data: ExerciseSetInput) -> None:
    exercise_set.reps = data.reps
    exercise_set.reality = data.reality
    exercise_set.weight = data.weight
    exercise_set.volume = data.volume


def _apply_exercise(exercise: Exercise, data: ExerciseInput) -> None:
    exercise.name = data.name
    exercise.sets = sync_ordered(exercise.sets, data.sets, ExerciseSet, _apply_set, "set_number")


def _apply_day(day: WorkoutDay, data: WorkoutDayInput) -> None:
    day.day_name = data.day
    day.is_rest_day = data.is_rest_day
    day.exercises = sync_ordered(day.exercises, data.exercises, Exercise, _apply_exercise, "exercise_order")


def copy_days(plan: WorkoutPlanRead) -> List[WorkoutDayInput]:
    """Глубокая копия структуры плана без идентификаторов: все строки будут созданы заново."""
    return [
        WorkoutDayInput(
            day=day.day,
            is_rest_day=day.is_rest_day,
            exercises=[
                ExerciseInput(
                    name=exercise.name,
                    sets=[
                        ExerciseSetInput(reps=s.reps, reality=s.reality, weight=s.weight, volume=s.volume)
                        for s in exercise.sets
                    ],
                )
                for exercise in day.exercises
            ],
        )
        for day in plan.days
    ]


class WorkoutPlanService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_client(self, client_id: str) -> None:
        async with store_operation(self.db, "проверка клиента"):
            client = await self.db.get(User, client_id)
        if client is None:
            raise PreconditionError(f"Không tìm thấy khách hàng {client_id}")

    async def _load_plan(self, plan_id: str) -> WorkoutPlan:
        async with store_operation(self.db, "загрузка плана тренировок"):
            result = await self.db.execute(
                plan_tree_query()
                .where(WorkoutPlan.id == plan_id)
                .execution_options(populate_existing=True)
            )
            plan = result.unique().scalar_one_or_none()
        if plan is None:
            raise NotFoundError("Không tìm thấy kế hoạch tập luyện")
        return plan

    async def list_plans(self, client_id: Optional[str] = None) -> List[WorkoutPlanRead]:
        query = plan_tree_query().order_by(WorkoutPlan.created_at.desc())
        if client_id is not None:
            query = query.where(WorkoutPlan.client_id == client_id)

        async with store_operation(self.db, "загрузка планов тренировок"):
            result = await self.db.execute(query.execution_options(populate_existing=True))
            plans = result.unique().scalars().all()
        return [build_plan_view(plan) for plan in plans]

    async def get_plan(self, plan_id: str) -> WorkoutPlanRead:
        return build_plan_view(await self._load_plan(plan_id))

    async def create_plan(self, data: WorkoutPlanCreate) -> WorkoutPlanRead:
        await self._ensure_client(data.client_id)

        plan = WorkoutPlan(
            name=data.name,
            client_id=data.client_id,
            week_number=data.week_number,
            start_date=data.start_date or date.today(),
            created_by=data.created_by,
        )
        plan.days = sync_ordered([], data.days, WorkoutDay, _apply_day, "day_order")

        # Весь план со всеми уровнями: одна транзакция
        async with store_operation(self.db, "добавление плана тренировок"):
            self.db.add(plan)
            await self.db.commit()

        logger.info(f"Создан план тренировок {plan.id} для клиента {plan.client_id}")
        return await self.get_plan(plan.id)

    async def update_plan(self, plan_id: str, data: WorkoutPlanUpdate) -> WorkoutPlanRead:
        plan = await self._load_plan(plan_id)

        fields = {
            key: value
            for key, value in data.model_dump(exclude_unset=True, exclude={"days"}).items()
            if value is not None
        }
        if "client_id" in fields and fields["client_id"] != plan.client_id:
            await self._ensure_client(fields["client_id"])

        async with store_operation(self.db, "обновление плана тренировок"):
            for key, value in fields.items():
                setattr(plan, key, value)
            if data.days is not None:
                plan.days = sync_ordered(plan.days, data.days, WorkoutDay, _apply_day, "day_order")
            plan.updated_at = datetime.utcnow()
            await self.db.commit()

        return await self.get_plan(plan_id)

    async def delete_plan(self, plan_id: str) -> None:
        async with store_operation(self.db, "удаление плана тренировок"):
            plan = await self.db.get(WorkoutPlan, plan_id)
            if plan is None:
                raise NotFoundError("Không tìm thấy kế hoạch tập luyện")
            await self.db.delete(plan)
            await self.db.commit()
        logger.info(f"Удалён план тренировок {plan_id}")

    async def duplicate_plan(self, plan_id: str, client_id: str) -> WorkoutPlanRead:
        source = await self.get_plan(plan_id)
        return await self.create_plan(
            WorkoutPlanCreate(
                name=f"{source.name} (Copy)",
                client_id=client_id,
                week_number=1,
                start_date=date.today(),
                created_by=PlanAuthorEnum.admin,
                days=copy_days(source),
            )
        )

    async def next_week_number(self, client_id: str) -> int:
        async with store_operation(self.db, "номер следующей недели"):
            result = await self.db.execute(
                select(func.max(WorkoutPlan.week_number)).where(WorkoutPlan.client_id == client_id)
            )
            current_max = result.scalar()
        return (current_max or 0) + 1

    async def create_next_week_plan(
            self,
            client_id: str,
            template_plan_id: str,
            created_by: PlanAuthorEnum = PlanAuthorEnum.client,
    ) -> WorkoutPlanRead:
        template = await self.get_plan(template_plan_id)
        week_number = await self.next_week_number(client_id)

        return await self.create_plan(
            WorkoutPlanCreate(
                name=template.name,
                client_id=client_id,
                week_number=week_number,
                start_date=date.today(),
                created_by=created_by,
                days=copy_days(template),
            )
        )
