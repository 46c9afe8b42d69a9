"""
Модульные тесты для плоских коллекций: отзывы, видео, записи веса.
"""

import pytest
from datetime import date

from phinpt.core.errors import NotFoundError, PreconditionError
from phinpt.schemas import content as content_schemas
from phinpt.schemas.weight import WeightRecordCreate
from phinpt.services import content_service
from phinpt.services.weight_service import WeightRecordService

pytestmark = pytest.mark.unit


def make_testimonial(name: str = "Chị Hoa", rating: int = 5):
    return content_schemas.TestimonialCreate(name=name, content="Giảm 8kg sau 3 tháng", rating=rating)


# ---------------------------------------------------------------------------
# Отзывы
# ---------------------------------------------------------------------------

async def test_add_testimonial_returns_stored_row(db_session):
    service = content_service.TestimonialService(db_session)

    item = await service.add_item(make_testimonial())

    assert item.id
    assert item.rating == 5
    assert item.created_at is not None


async def test_list_testimonials_newest_first(db_session):
    service = content_service.TestimonialService(db_session)
    older = await service.add_item(make_testimonial("A"))
    newer = await service.add_item(make_testimonial("B"))

    items = await service.list_items()

    assert {i.id for i in items} == {older.id, newer.id}
    assert items[0].created_at >= items[1].created_at


async def test_update_testimonial_partial_fields(db_session):
    service = content_service.TestimonialService(db_session)
    item = await service.add_item(make_testimonial())

    updated = await service.update_item(
        item.id,
        content_schemas.TestimonialUpdate(rating=4, after_image="http://img/after.jpg"),
    )

    assert updated.rating == 4
    assert updated.after_image == "http://img/after.jpg"
    assert updated.name == "Chị Hoa"


async def test_update_testimonial_ignores_null_for_required_field(db_session):
    service = content_service.TestimonialService(db_session)
    item = await service.add_item(make_testimonial())

    updated = await service.update_item(item.id, content_schemas.TestimonialUpdate(name=None, avatar=None))

    assert updated.name == "Chị Hoa"
    assert updated.avatar is None


async def test_update_missing_testimonial_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        await content_service.TestimonialService(db_session).update_item(
            "nope", content_schemas.TestimonialUpdate(rating=3)
        )


async def test_delete_testimonial(db_session):
    service = content_service.TestimonialService(db_session)
    item = await service.add_item(make_testimonial())

    await service.delete_item(item.id)

    assert await service.list_items() == []
    with pytest.raises(NotFoundError):
        await service.delete_item(item.id)


# ---------------------------------------------------------------------------
# Видео
# ---------------------------------------------------------------------------

async def test_video_crud(db_session):
    service = content_service.VideoService(db_session)

    video = await service.add_item(
        content_schemas.VideoCreate(title="Squat chuẩn", youtube_id="dQw4w9WgXcQ", category="Chân")
    )
    assert video.description == ""

    updated = await service.update_item(video.id, content_schemas.VideoUpdate(description="Hướng dẫn"))
    assert updated.description == "Hướng dẫn"
    assert updated.youtube_id == "dQw4w9WgXcQ"

    await service.delete_item(video.id)
    assert await service.list_items() == []


# ---------------------------------------------------------------------------
# Записи веса
# ---------------------------------------------------------------------------

async def test_weight_records_sorted_by_date_desc(db_session, client_user):
    service = WeightRecordService(db_session)
    await service.add_record(WeightRecordCreate(client_id=client_user.id, weight=70.5, date=date(2024, 1, 1)))
    await service.add_record(WeightRecordCreate(client_id=client_user.id, weight=69.0, date=date(2024, 2, 1)))

    records = await service.list_records(client_user.id)

    assert [r.weight for r in records] == [69.0, 70.5]


async def test_weight_records_filtered_by_client(db_session, client_user, other_client):
    service = WeightRecordService(db_session)
    await service.add_record(WeightRecordCreate(client_id=client_user.id, weight=60, date=date(2024, 1, 1)))
    await service.add_record(WeightRecordCreate(client_id=other_client.id, weight=80, date=date(2024, 1, 1)))

    assert len(await service.list_records()) == 2
    assert [r.client_id for r in await service.list_records(other_client.id)] == [other_client.id]


async def test_add_weight_record_unknown_client_raises_precondition(db_session):
    with pytest.raises(PreconditionError):
        await WeightRecordService(db_session).add_record(
            WeightRecordCreate(client_id="missing", weight=60, date=date(2024, 1, 1))
        )


async def test_delete_weight_record(db_session, client_user):
    service = WeightRecordService(db_session)
    record = await service.add_record(WeightRecordCreate(client_id=client_user.id, weight=60, date=date(2024, 1, 1)))

    await service.delete_record(record.id)

    assert await service.list_records() == []
    with pytest.raises(NotFoundError):
        await service.delete_record(record.id)
