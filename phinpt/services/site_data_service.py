"""
Начальная загрузка всех коллекций сайта.

Все запросы уходят параллельно, каждый в своей сессии (одна AsyncSession не допускает
конкурентных запросов). По умолчанию ждём завершения всех: упавшая коллекция логируется,
заменяется пустым списком / значениями по умолчанию и попадает в список failed.
В строгом режиме первая же ошибка прерывает всю загрузку.
"""
import asyncio
import logging
from typing import Dict, List, Sequence, Tuple

from sqlalchemy.ext.asyncio import async_sessionmaker

from phinpt.repositories.user_repository import UserRepository
from phinpt.schemas.content import TestimonialRead, VideoRead
from phinpt.schemas.site import SiteSnapshot, AdminDashboard
from phinpt.schemas.user import UserRead
from phinpt.schemas.weight import WeightRecordRead
from phinpt.services.content_service import TestimonialService, VideoService
from phinpt.services.meal_plan_service import MealPlanService
from phinpt.services.site_settings_service import (
    SiteSettingsService,
    DEFAULT_CONTACT_INFO,
    DEFAULT_HOME_CONTENT,
)
from phinpt.services.user_service import UserService
from phinpt.services.weight_service import WeightRecordService
from phinpt.services.workout_plan_service import WorkoutPlanService

logger = logging.getLogger(__name__)

PUBLIC_COLLECTIONS = ("home_content", "contact_info", "testimonials", "videos")
ADMIN_COLLECTIONS = PUBLIC_COLLECTIONS + ("workout_plans", "meal_plans", "weight_records", "users")


async def _fetch_testimonials(db):
    return [TestimonialRead.model_validate(t) for t in await TestimonialService(db).list_items()]


async def _fetch_videos(db):
    return [VideoRead.model_validate(v) for v in await VideoService(db).list_items()]


async def _fetch_weight_records(db):
    return [WeightRecordRead.model_validate(r) for r in await WeightRecordService(db).list_records()]


async def _fetch_users(db):
    return [UserRead.model_validate(u) for u in await UserService(UserRepository(db)).list_users()]


FETCHERS = {
    "home_content": lambda db: SiteSettingsService(db).get_home_content(),
    "contact_info": lambda db: SiteSettingsService(db).get_contact_info(),
    "testimonials": _fetch_testimonials,
    "videos": _fetch_videos,
    "workout_plans": lambda db: WorkoutPlanService(db).list_plans(),
    "meal_plans": lambda db: MealPlanService(db).list_plans(),
    "weight_records": _fetch_weight_records,
    "users": _fetch_users,
}

FALLBACKS = {
    "home_content": lambda: DEFAULT_HOME_CONTENT.model_copy(deep=True),
    "contact_info": lambda: DEFAULT_CONTACT_INFO.model_copy(),
}


class SiteDataLoader:
    def __init__(self, session_factory: async_sessionmaker, strict: bool = False):
        self.session_factory = session_factory
        self.strict = strict

    async def _fetch(self, name: str):
        async with self.session_factory() as db:
            return await FETCHERS[name](db)

    async def load(self, names: Sequence[str]) -> Tuple[Dict[str, object], List[str]]:
        tasks = [asyncio.ensure_future(self._fetch(name)) for name in names]

        if self.strict:
            try:
                results = await asyncio.gather(*tasks)
            except Exception:
                # Остальные загрузки не нужны: отменяем и дожидаемся закрытия их сессий
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
            return dict(zip(names, results)), []

        results = await asyncio.gather(*tasks, return_exceptions=True)
        data, failed = {}, []
        for name, result in zip(names, results):
            if isinstance(result, Exception):
                logger.error(f"Не удалось загрузить коллекцию {name}: {result!r}")
                failed.append(name)
                data[name] = FALLBACKS.get(name, list)()
            else:
                data[name] = result
        return data, failed

    async def load_site(self) -> SiteSnapshot:
        data, failed = await self.load(PUBLIC_COLLECTIONS)
        return SiteSnapshot(**data, failed=failed)

    async def load_dashboard(self) -> AdminDashboard:
        data, failed = await self.load(ADMIN_COLLECTIONS)
        return AdminDashboard(**data, failed=failed)
