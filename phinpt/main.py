import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phinpt.api.router import api_router
from phinpt.core import init_database, settings
from phinpt.core.db import AsyncSessionLocal
from phinpt.core.errors import register_exception_handlers
from phinpt.repositories.user_repository import UserRepository
from phinpt.services import s3_service
from phinpt.services.auth_service import auth_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="PhinPT - personal trainer website API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    await init_database()
    logger.info("Приложение запущено")

    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        async with AsyncSessionLocal() as session:
            admin = await auth_service.setup_admin_user(
                UserRepository(session),
                username=settings.ADMIN_USERNAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                full_name=settings.ADMIN_FULL_NAME,
            )
            logger.info(f"Администратор готов: {admin.username} (ID: {admin.id})")

    try:
        await s3_service.ensure_bucket_exists()
    except Exception as e:
        # Без хранилища изображений сайт работает, не работают только загрузки
        logger.warning(f"Хранилище изображений недоступно: {e}")


@app.get("/")
async def root():
    return {
        "app": "PhinPT",
        "message": "Phi Nguyễn Personal Trainer API",
        "links": {
            "site": "/api/v1/site",
            "auth": "/api/v1/auth/login",
            "admin": "/api/v1/admin/dashboard",
            "docs": "/docs",
        },
    }
