"""
Модульные тесты для WorkoutPlanService поверх тестовой SQLite-базы.

Проверяются:
- создание всего дерева одной транзакцией с плотной нумерацией порядка
- стабильный порядок при повторном чтении
- обновление с сохранением id совпавших дочерних элементов
- каскадное удаление без осиротевших строк
- дублирование и план следующей недели
"""

import pytest
from sqlalchemy import select, func

from phinpt.core.errors import NotFoundError, PreconditionError
from phinpt.models.workout import WorkoutDay, Exercise, ExerciseSet, PlanAuthorEnum
from phinpt.schemas.workout import (
    WorkoutPlanCreate,
    WorkoutPlanUpdate,
    WorkoutDayInput,
    ExerciseInput,
    ExerciseSetInput,
)
from phinpt.services.workout_plan_service import WorkoutPlanService

pytestmark = pytest.mark.unit


def make_plan_payload(client_id: str, name: str = "Tuần 1", week_number: int = 1) -> WorkoutPlanCreate:
    return WorkoutPlanCreate(
        name=name,
        client_id=client_id,
        week_number=week_number,
        days=[
            WorkoutDayInput(
                day="Thứ 2",
                exercises=[
                    ExerciseInput(
                        name="Squat",
                        sets=[
                            ExerciseSetInput(reps=10, weight=60),
                            ExerciseSetInput(reps=8, weight=70),
                            ExerciseSetInput(reps=6, weight=80),
                        ],
                    ),
                    ExerciseInput(name="Lunge", sets=[ExerciseSetInput(reps=12)]),
                ],
            ),
            WorkoutDayInput(day="Thứ 3", is_rest_day=True),
            WorkoutDayInput(
                day="Thứ 4",
                exercises=[ExerciseInput(name="Bench press", sets=[ExerciseSetInput(reps=10, weight=50)])],
            ),
        ],
    )


async def count_rows(db_session, model) -> int:
    result = await db_session.execute(select(func.count()).select_from(model))
    return result.scalar()


# ---------------------------------------------------------------------------
# create_plan / get_plan
# ---------------------------------------------------------------------------

async def test_create_plan_returns_tree_in_input_order(db_session, client_user):
    service = WorkoutPlanService(db_session)

    plan = await service.create_plan(make_plan_payload(client_user.id))

    assert plan.id
    assert [d.day for d in plan.days] == ["Thứ 2", "Thứ 3", "Thứ 4"]
    assert [e.name for e in plan.days[0].exercises] == ["Squat", "Lunge"]
    assert [s.set for s in plan.days[0].exercises[0].sets] == [1, 2, 3]
    assert [s.reps for s in plan.days[0].exercises[0].sets] == [10, 8, 6]
    assert plan.days[1].is_rest_day is True
    assert plan.days[1].exercises == []


async def test_create_plan_stores_dense_order_fields(db_session, client_user):
    await WorkoutPlanService(db_session).create_plan(make_plan_payload(client_user.id))

    orders = (await db_session.execute(select(WorkoutDay.day_order).order_by(WorkoutDay.day_order))).scalars().all()
    assert orders == [1, 2, 3]


async def test_get_plan_is_stable_across_reads(db_session, client_user):
    service = WorkoutPlanService(db_session)
    created = await service.create_plan(make_plan_payload(client_user.id))

    first = await service.get_plan(created.id)
    second = await service.get_plan(created.id)

    assert first == second == created


async def test_create_plan_unknown_client_raises_precondition(db_session):
    service = WorkoutPlanService(db_session)

    with pytest.raises(PreconditionError):
        await service.create_plan(make_plan_payload("missing-client"))

    assert await count_rows(db_session, WorkoutDay) == 0


async def test_get_plan_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        await WorkoutPlanService(db_session).get_plan("nope")


async def test_list_plans_filters_by_client(db_session, client_user, other_client):
    service = WorkoutPlanService(db_session)
    await service.create_plan(make_plan_payload(client_user.id, name="Lan"))
    await service.create_plan(make_plan_payload(other_client.id, name="Minh"))

    assert len(await service.list_plans()) == 2
    mine = await service.list_plans(client_user.id)
    assert [p.name for p in mine] == ["Lan"]


# ---------------------------------------------------------------------------
# update_plan
# ---------------------------------------------------------------------------

async def test_update_plan_keeps_ids_of_matched_children(db_session, client_user):
    service = WorkoutPlanService(db_session)
    plan = await service.create_plan(make_plan_payload(client_user.id))
    monday = plan.days[0]
    squat = monday.exercises[0]

    # Убираем Lunge и средний подход, меняем местами дни
    updated = await service.update_plan(
        plan.id,
        WorkoutPlanUpdate(
            name="Tuần 1 (sửa)",
            days=[
                WorkoutDayInput(id=plan.days[2].id, day="Thứ 4", exercises=[
                    ExerciseInput(id=plan.days[2].exercises[0].id, name="Bench press", sets=[
                        ExerciseSetInput(id=plan.days[2].exercises[0].sets[0].id, reps=12, weight=50),
                    ]),
                ]),
                WorkoutDayInput(id=monday.id, day="Thứ 2", exercises=[
                    ExerciseInput(id=squat.id, name="Back squat", sets=[
                        ExerciseSetInput(id=squat.sets[0].id, reps=10, weight=60),
                        ExerciseSetInput(id=squat.sets[2].id, reps=5, weight=85),
                    ]),
                ]),
            ],
        ),
    )

    assert updated.name == "Tuần 1 (sửa)"
    assert [d.id for d in updated.days] == [plan.days[2].id, monday.id]
    new_squat = updated.days[1].exercises[0]
    assert new_squat.id == squat.id
    assert new_squat.name == "Back squat"
    assert [s.id for s in new_squat.sets] == [squat.sets[0].id, squat.sets[2].id]
    assert [s.set for s in new_squat.sets] == [1, 2]
    assert updated.days[0].exercises[0].sets[0].reps == 12

    assert await count_rows(db_session, WorkoutDay) == 2
    assert await count_rows(db_session, Exercise) == 2
    assert await count_rows(db_session, ExerciseSet) == 3


async def test_update_plan_without_days_leaves_tree_untouched(db_session, client_user):
    service = WorkoutPlanService(db_session)
    plan = await service.create_plan(make_plan_payload(client_user.id))

    updated = await service.update_plan(plan.id, WorkoutPlanUpdate(week_number=2))

    assert updated.week_number == 2
    assert updated.days == plan.days


async def test_update_plan_children_without_id_are_created(db_session, client_user):
    service = WorkoutPlanService(db_session)
    plan = await service.create_plan(make_plan_payload(client_user.id))

    updated = await service.update_plan(
        plan.id,
        WorkoutPlanUpdate(days=[WorkoutDayInput(day="Chủ nhật", is_rest_day=True)]),
    )

    assert len(updated.days) == 1
    assert updated.days[0].id not in {d.id for d in plan.days}
    assert await count_rows(db_session, ExerciseSet) == 0


async def test_update_plan_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        await WorkoutPlanService(db_session).update_plan("nope", WorkoutPlanUpdate(name="x"))


# ---------------------------------------------------------------------------
# delete_plan
# ---------------------------------------------------------------------------

async def test_delete_plan_cascades_to_all_levels(db_session, client_user):
    service = WorkoutPlanService(db_session)
    plan = await service.create_plan(make_plan_payload(client_user.id))

    await service.delete_plan(plan.id)

    assert await count_rows(db_session, WorkoutDay) == 0
    assert await count_rows(db_session, Exercise) == 0
    assert await count_rows(db_session, ExerciseSet) == 0
    with pytest.raises(NotFoundError):
        await service.get_plan(plan.id)


async def test_delete_plan_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        await WorkoutPlanService(db_session).delete_plan("nope")


# ---------------------------------------------------------------------------
# duplicate_plan / next week
# ---------------------------------------------------------------------------

def strip_ids(plan) -> list:
    return [
        (d.day, d.is_rest_day, [(e.name, [(s.set, s.reps, s.weight) for s in e.sets]) for e in d.exercises])
        for d in plan.days
    ]


async def test_duplicate_plan_copies_structure_for_target_client(db_session, client_user, other_client):
    service = WorkoutPlanService(db_session)
    source = await service.create_plan(make_plan_payload(client_user.id, week_number=3))

    copy = await service.duplicate_plan(source.id, other_client.id)

    assert copy.id != source.id
    assert copy.name == "Tuần 1 (Copy)"
    assert copy.client_id == other_client.id
    assert copy.week_number == 1
    assert copy.created_by == PlanAuthorEnum.admin
    assert strip_ids(copy) == strip_ids(source)
    assert not {d.id for d in copy.days} & {d.id for d in source.days}


async def test_duplicate_missing_plan_raises_not_found(db_session, client_user):
    with pytest.raises(NotFoundError):
        await WorkoutPlanService(db_session).duplicate_plan("nope", client_user.id)


async def test_next_week_number_starts_at_one(db_session, client_user):
    assert await WorkoutPlanService(db_session).next_week_number(client_user.id) == 1


async def test_create_next_week_plan_uses_max_week_plus_one(db_session, client_user):
    service = WorkoutPlanService(db_session)
    await service.create_plan(make_plan_payload(client_user.id, week_number=1))
    template = await service.create_plan(make_plan_payload(client_user.id, name="Tuần 4", week_number=4))

    nxt = await service.create_next_week_plan(client_user.id, template.id)

    assert nxt.week_number == 5
    assert nxt.name == "Tuần 4"
    assert nxt.created_by == PlanAuthorEnum.client
    assert strip_ids(nxt) == strip_ids(template)


async def test_create_next_week_plan_missing_template_raises_not_found(db_session, client_user):
    with pytest.raises(NotFoundError):
        await WorkoutPlanService(db_session).create_next_week_plan(client_user.id, "nope")
