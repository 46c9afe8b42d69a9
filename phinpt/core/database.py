import logging

from phinpt.core.base import Base
from phinpt.core.config import settings
from phinpt.core.db import engine

# Импортируем ВСЕ модели, чтобы metadata знала о каждой таблице
import phinpt.models  # noqa: F401

logger = logging.getLogger(__name__)


async def init_database():
    """Инициализация базы данных"""
    async with engine.begin() as conn:
        if settings.RESET_DATABASE:
            logger.warning("RESET_DATABASE=true - пересоздаем БД")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы БД созданы/проверены")
