import logging
from datetime import date, datetime
from typing import List, Optional

from phinpt.core.errors import ConflictError, NotFoundError, PreconditionError, store_operation
from phinpt.models.user import User, RoleEnum
from phinpt.repositories.user_repository import UserRepository
from phinpt.schemas.user import UserCreate, UserUpdate
from phinpt.services.auth_service import auth_service

logger = logging.getLogger(__name__)


class UserService:
    """Управление учётными записями из админ-панели."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def _get(self, user_id: str) -> User:
        async with store_operation(self.repo.db, "загрузка пользователя"):
            user = await self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("Không tìm thấy người dùng")
        return user

    async def _ensure_unique(self, username: Optional[str], email: Optional[str], exclude_id: Optional[str] = None):
        async with store_operation(self.repo.db, "проверка уникальности"):
            by_username = await self.repo.get_by_username(username) if username else None
            by_email = await self.repo.get_by_email(email) if email else None
        if by_username is not None and by_username.id != exclude_id:
            raise ConflictError("Tên đăng nhập đã được sử dụng")
        if by_email is not None and by_email.id != exclude_id:
            raise ConflictError("Email đã được sử dụng")

    async def list_users(self, role: Optional[RoleEnum] = None) -> List[User]:
        async with store_operation(self.repo.db, "загрузка пользователей"):
            return await self.repo.list_users(role)

    async def add_user(self, data: UserCreate) -> User:
        await self._ensure_unique(data.username, data.email)

        user = User(
            username=data.username,
            email=data.email,
            password_hash=auth_service.hash_password(data.password),
            full_name=data.full_name,
            phone=data.phone,
            role=data.role,
            avatar=data.avatar,
            start_date=data.start_date or date.today(),
        )
        async with store_operation(self.repo.db, "добавление пользователя"):
            user = await self.repo.create_user(user)
        logger.info(f"Создан пользователь {user.username} ({user.role.value})")
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self._get(user_id)
        fields = data.model_dump(exclude_unset=True)
        await self._ensure_unique(fields.get("username"), fields.get("email"), exclude_id=user.id)

        password = fields.pop("password", None)
        async with store_operation(self.repo.db, "обновление пользователя"):
            for key, value in fields.items():
                if value is not None or key in ("phone", "avatar"):
                    setattr(user, key, value)
            if password:
                user.password_hash = auth_service.hash_password(password)
            user.updated_at = datetime.utcnow()
            user = await self.repo.save(user)
        return user

    async def delete_user(self, user_id: str, current_user: User) -> None:
        if user_id == current_user.id:
            raise PreconditionError("Không thể tự xóa tài khoản của mình")

        user = await self._get(user_id)
        async with store_operation(self.repo.db, "удаление пользователя"):
            await self.repo.delete_user(user)
        logger.info(f"Удалён пользователь {user.username}")
