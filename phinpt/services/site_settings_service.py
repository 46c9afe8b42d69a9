"""
Настройки сайта: таблицы-синглтоны contact_info и home_content.

Чтение: безусловный запрос с limit(1); если строки ещё нет, отдаются значения по умолчанию.
Запись: upsert: обновляем единственную строку, если она есть, иначе вставляем новую.
"""
import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from phinpt.core.errors import store_operation
from phinpt.models.site_settings import ContactInfo, HomeContent
from phinpt.schemas.site_settings import (
    ContactInfoRead,
    ContactInfoUpdate,
    HomeContentRead,
    HomeContentUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTACT_INFO = ContactInfoRead(
    phone="0123456789",
    facebook="https://facebook.com/phinpt",
    zalo="https://zalo.me/0123456789",
    email="contact@phinpt.com",
)

DEFAULT_HOME_CONTENT = HomeContentRead(
    hero_title="Phi Nguyễn Personal Trainer",
    hero_subtitle="Chuyên gia huấn luyện cá nhân - Giúp bạn đạt được mục tiêu fitness",
    about_text=(
        "Với nhiều năm kinh nghiệm trong lĩnh vực fitness, tôi cam kết mang đến "
        "cho bạn những buổi tập hiệu quả nhất."
    ),
    services_title="Dịch vụ của tôi",
    services=[
        "Personal Training 1-1",
        "Lập kế hoạch tập luyện",
        "Tư vấn dinh dưỡng",
        "Theo dõi tiến độ",
    ],
)


class SiteSettingsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _first(self, model):
        result = await self.db.execute(select(model).limit(1))
        return result.scalar_one_or_none()

    async def _upsert(self, model, data, operation: str):
        async with store_operation(self.db, operation):
            row = await self._first(model)
            if row is None:
                row = model(**data.model_dump())
                self.db.add(row)
            else:
                for key, value in data.model_dump().items():
                    setattr(row, key, value)
                row.updated_at = datetime.utcnow()
            await self.db.commit()
            await self.db.refresh(row)
        return row

    async def get_contact_info(self) -> ContactInfoRead:
        async with store_operation(self.db, "загрузка контактов"):
            row = await self._first(ContactInfo)
        if row is None:
            return DEFAULT_CONTACT_INFO.model_copy()
        return ContactInfoRead.model_validate(row)

    async def update_contact_info(self, data: ContactInfoUpdate) -> ContactInfoRead:
        row = await self._upsert(ContactInfo, data, "сохранение контактов")
        return ContactInfoRead.model_validate(row)

    async def get_home_content(self) -> HomeContentRead:
        async with store_operation(self.db, "загрузка контента главной"):
            row = await self._first(HomeContent)
        if row is None:
            return DEFAULT_HOME_CONTENT.model_copy(deep=True)
        return HomeContentRead.model_validate(row)

    async def update_home_content(self, data: HomeContentUpdate) -> HomeContentRead:
        row = await self._upsert(HomeContent, data, "сохранение контента главной")
        return HomeContentRead.model_validate(row)
