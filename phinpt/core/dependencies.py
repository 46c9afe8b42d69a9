"""Зависимости FastAPI: текущий пользователь и сервисы, создаваемые на каждый запрос."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from phinpt.core.config import settings
from phinpt.core.db import get_db, AsyncSessionLocal
from phinpt.core.errors import store_operation
from phinpt.models.user import User
from phinpt.repositories.user_repository import UserRepository
from phinpt.services.auth_service import auth_service
from phinpt.services.content_service import TestimonialService, VideoService
from phinpt.services.meal_plan_service import MealPlanService
from phinpt.services.site_data_service import SiteDataLoader
from phinpt.services.site_settings_service import SiteSettingsService
from phinpt.services.user_service import UserService
from phinpt.services.weight_service import WeightRecordService
from phinpt.services.workout_plan_service import WorkoutPlanService

security = HTTPBearer()


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)


def get_workout_plan_service(db: AsyncSession = Depends(get_db)) -> WorkoutPlanService:
    return WorkoutPlanService(db)


def get_meal_plan_service(db: AsyncSession = Depends(get_db)) -> MealPlanService:
    return MealPlanService(db)


def get_weight_service(db: AsyncSession = Depends(get_db)) -> WeightRecordService:
    return WeightRecordService(db)


def get_testimonial_service(db: AsyncSession = Depends(get_db)) -> TestimonialService:
    return TestimonialService(db)


def get_video_service(db: AsyncSession = Depends(get_db)) -> VideoService:
    return VideoService(db)


def get_settings_service(db: AsyncSession = Depends(get_db)) -> SiteSettingsService:
    return SiteSettingsService(db)


def get_site_loader() -> SiteDataLoader:
    """Загрузчик коллекций открывает собственную сессию на каждую коллекцию."""
    return SiteDataLoader(AsyncSessionLocal, strict=settings.STRICT_INITIAL_LOAD)


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    user_id = auth_service.decode_access_subject(credentials.credentials)
    # Учётка могла быть удалена после выдачи токена
    user = None
    if user_id:
        async with store_operation(repo.db, "проверка сессии"):
            user = await repo.get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Phiên đăng nhập không hợp lệ",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
