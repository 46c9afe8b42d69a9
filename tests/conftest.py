"""
Общие фикстуры для всех тестов PhinPT backend.

Стратегия:
- Переменные окружения DATABASE_URL/SECRET_KEY задаются до импорта приложения
  (без них Settings не создаётся: это фатальная ошибка старта).
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД/MinIO).
- Для auth-эндпоинтов UserRepository заменяется на AsyncMock (mock_repo).
- Для данных используется настоящая БД: временный SQLite-файл через aiosqlite,
  с включёнными внешними ключами (каскадное удаление как в продакшн-хранилище).
- get_current_user заменяется на лямбду с нужным пользователем.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import date, datetime
from typing import AsyncGenerator

from phinpt.api.router import api_router
from phinpt.core.base import Base
from phinpt.core.db import build_engine, build_sessionmaker, get_db
from phinpt.core.dependencies import get_current_user, get_user_repository, get_site_loader
from phinpt.core.errors import register_exception_handlers
from phinpt.models.user import User, RoleEnum
from phinpt.repositories.user_repository import UserRepository
from phinpt.services.auth_service import auth_service
from phinpt.services.site_data_service import SiteDataLoader


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="PhinPT Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


def make_auth_headers(user: User) -> dict:
    """Создать заголовки авторизации с валидным JWT для указанного пользователя."""
    access_token = auth_service.create_access_token(
        data={"sub": str(user.id), "role": user.role.value}
    )
    return {"Authorization": f"Bearer {access_token}"}


def make_user(
        username: str,
        role: RoleEnum = RoleEnum.client,
        password: str = "password123",
        user_id: str = None,
) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=auth_service.hash_password(password),
        full_name=username.title(),
        role=role,
        start_date=date.today(),
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )
    if user_id is not None:
        user.id = user_id
    return user


def make_repo_mock() -> AsyncMock:
    """UserRepository-мок с сессией: сервисы откатывают repo.db при ошибке хранилища."""
    repo = AsyncMock(spec=UserRepository)
    repo.db = AsyncMock()
    return repo


async def _client_for(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Фикстуры пользователей (без БД)
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    """Клиент с ролью 'client'."""
    return make_user("tester", RoleEnum.client, "password123", user_id="00000000-0000-0000-0000-000000000010")


@pytest.fixture
def admin_fixture() -> User:
    """Администратор с ролью 'admin'."""
    return make_user("admin", RoleEnum.admin, "admin123", user_id="00000000-0000-0000-0000-000000000001")


@pytest.fixture
def mock_repo() -> AsyncMock:
    """Мокированный UserRepository для auth-эндпоинтов."""
    return make_repo_mock()


# ---------------------------------------------------------------------------
# Настоящее хранилище: временный SQLite
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine(tmp_path):
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'phinpt_test.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def admin_user(session_factory) -> User:
    """Администратор, сохранённый в тестовой БД."""
    async with session_factory() as session:
        return await UserRepository(session).create_user(make_user("coach", RoleEnum.admin, "admin123"))


@pytest.fixture
async def client_user(session_factory) -> User:
    """Клиент, сохранённый в тестовой БД."""
    async with session_factory() as session:
        return await UserRepository(session).create_user(make_user("lan", RoleEnum.client, "client123"))


@pytest.fixture
async def other_client(session_factory) -> User:
    async with session_factory() as session:
        return await UserRepository(session).create_user(make_user("minh", RoleEnum.client, "client456"))


def make_db_app(session_factory, current_user: User = None) -> FastAPI:
    app = create_test_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_site_loader] = lambda: SiteDataLoader(session_factory)
    if current_user is not None:
        app.dependency_overrides[get_current_user] = lambda: current_user
    return app


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(mock_repo) -> AsyncGenerator[AsyncClient, None]:
    """
    Базовый клиент: get_user_repository → mock_repo.
    Используется для auth-эндпоинтов (register, login, refresh, logout, me).
    """
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_repo
    async for ac in _client_for(app):
        yield ac


@pytest.fixture
async def anonymous_api(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Клиент без авторизации поверх тестовой БД (публичный сайт, настоящий логин)."""
    async for ac in _client_for(make_db_app(session_factory)):
        yield ac


@pytest.fixture
async def admin_api(session_factory, admin_user) -> AsyncGenerator[AsyncClient, None]:
    """Клиент, аутентифицированный как администратор, поверх тестовой БД."""
    async for ac in _client_for(make_db_app(session_factory, admin_user)):
        yield ac


@pytest.fixture
async def client_api(session_factory, client_user) -> AsyncGenerator[AsyncClient, None]:
    """Клиент, аутентифицированный как клиент тренера, поверх тестовой БД."""
    async for ac in _client_for(make_db_app(session_factory, client_user)):
        yield ac
