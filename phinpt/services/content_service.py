"""Плоские коллекции контента: отзывы и видео."""
import logging
from datetime import datetime
from typing import List

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from phinpt.core.errors import NotFoundError, store_operation
from phinpt.models.content import Testimonial, Video

logger = logging.getLogger(__name__)


class ContentService:
    model = None
    label = ""
    not_found_message = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get(self, item_id: str):
        async with store_operation(self.db, f"загрузка {self.label}"):
            item = await self.db.get(self.model, item_id)
        if item is None:
            raise NotFoundError(self.not_found_message)
        return item

    async def list_items(self) -> List:
        async with store_operation(self.db, f"загрузка {self.label}"):
            result = await self.db.execute(select(self.model).order_by(self.model.created_at.desc()))
            return list(result.scalars().all())

    async def add_item(self, data: BaseModel):
        item = self.model(**data.model_dump())
        async with store_operation(self.db, f"добавление {self.label}"):
            self.db.add(item)
            await self.db.commit()
            await self.db.refresh(item)
        return item

    async def update_item(self, item_id: str, data: BaseModel):
        item = await self._get(item_id)
        async with store_operation(self.db, f"обновление {self.label}"):
            for key, value in data.model_dump(exclude_unset=True).items():
                if value is None and not self.model.__table__.c[key].nullable:
                    continue
                setattr(item, key, value)
            item.updated_at = datetime.utcnow()
            await self.db.commit()
            await self.db.refresh(item)
        return item

    async def delete_item(self, item_id: str) -> None:
        item = await self._get(item_id)
        async with store_operation(self.db, f"удаление {self.label}"):
            await self.db.delete(item)
            await self.db.commit()
        logger.info(f"Удалён {self.label} {item_id}")


class TestimonialService(ContentService):
    model = Testimonial
    label = "отзыва"
    not_found_message = "Không tìm thấy đánh giá"


class VideoService(ContentService):
    model = Video
    label = "видео"
    not_found_message = "Không tìm thấy video"
