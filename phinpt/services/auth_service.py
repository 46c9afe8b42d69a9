import logging
import uuid
from datetime import datetime, timedelta, date
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from phinpt.core.config import settings
from phinpt.core.errors import ConflictError, store_operation
from phinpt.models.user import User, RoleEnum
from phinpt.repositories.user_repository import UserRepository
from phinpt.schemas.auth import UserLogin, UserRegister, AuthResponse

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self):
        self.SECRET_KEY = settings.SECRET_KEY
        self.REFRESH_SECRET_KEY = settings.REFRESH_SECRET_KEY
        self.ALGORITHM = settings.ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
        self.REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')  # Декодируем bytes в string для хранения в БД

    def verify_password(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                plain_password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError:
            # В хранилище не bcrypt-хэш (например, пароль в открытом виде): вход запрещён
            return False

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None):
        to_encode = data.copy()
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def create_refresh_token(self, data: dict):
        to_encode = data.copy()
        expire = datetime.utcnow() + timedelta(days=self.REFRESH_TOKEN_EXPIRE_DAYS)
        # jti делает каждый refresh-токен уникальным, даже выпущенный в ту же секунду
        to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
        return jwt.encode(to_encode, self.REFRESH_SECRET_KEY, algorithm=self.ALGORITHM)

    def _decode_subject(self, token: str, key: str) -> Optional[str]:
        try:
            payload = jwt.decode(token, key, algorithms=[self.ALGORITHM])
        except JWTError:
            return None
        return payload.get("sub")

    def decode_access_subject(self, access_token: str) -> Optional[str]:
        """id пользователя из access-токена или None, если подпись/срок недействительны."""
        return self._decode_subject(access_token, self.SECRET_KEY)

    def _decode_refresh_subject(self, refresh_token: str) -> Optional[str]:
        return self._decode_subject(refresh_token, self.REFRESH_SECRET_KEY)

    async def issue_tokens(self, repo: UserRepository, user: User) -> AuthResponse:
        """Выдать пару токенов и сохранить refresh-токен как серверную сессию."""
        access_token = self.create_access_token(
            data={"sub": str(user.id), "role": user.role.value}
        )
        refresh_token = self.create_refresh_token(data={"sub": str(user.id)})
        async with store_operation(repo.db, "сохранение сессии"):
            await repo.save_refresh_token(
                user,
                refresh_token,
                datetime.utcnow() + timedelta(days=self.REFRESH_TOKEN_EXPIRE_DAYS),
            )
        return AuthResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="bearer",
            role=user.role.value,
            is_admin=user.is_admin,
        )

    async def authenticate_user(self, repo: UserRepository, login_data: UserLogin) -> Optional[User]:
        async with store_operation(repo.db, "вход"):
            user = await repo.get_by_identifier(login_data.identifier)

        if not user or not self.verify_password(login_data.password, user.password_hash):
            return None

        return user

    async def register_user(self, repo: UserRepository, user_data: UserRegister) -> User:
        async with store_operation(repo.db, "проверка регистрационных данных"):
            email_taken = await repo.get_by_email(user_data.email) is not None
            username_taken = await repo.get_by_username(user_data.username) is not None
        if email_taken:
            raise ConflictError("Email đã được sử dụng")
        if username_taken:
            raise ConflictError("Tên đăng nhập đã được sử dụng")

        new_user = User(
            username=user_data.username,
            email=user_data.email,
            password_hash=self.hash_password(user_data.password),
            full_name=user_data.full_name,
            phone=user_data.phone,
            role=RoleEnum.client,
            start_date=date.today(),
            created_at=datetime.utcnow(),
        )
        async with store_operation(repo.db, "регистрация"):
            return await repo.create_user(new_user)

    async def rotate_refresh_token(self, repo: UserRepository, refresh_token: str) -> Optional[AuthResponse]:
        user_id = self._decode_refresh_subject(refresh_token)
        if user_id is None:
            return None

        async with store_operation(repo.db, "ротация refresh-токена"):
            user = await repo.get_by_refresh_token(refresh_token)
            if user is None:
                # Подпись верна, но токена нет в БД: его уже использовали
                victim = await repo.get_by_id(user_id)
                if victim is not None:
                    logger.warning(f"Повторное использование refresh-токена пользователя {user_id}")
                    await repo.revoke_refresh_token(victim)
                return None

        if user.refresh_token_expires is None or user.refresh_token_expires < datetime.utcnow():
            return None

        return await self.issue_tokens(repo, user)

    async def logout_user(self, repo: UserRepository, refresh_token: str) -> bool:
        user_id = self._decode_refresh_subject(refresh_token)
        if user_id is None:
            return False

        async with store_operation(repo.db, "выход"):
            user = await repo.get_by_id(user_id)
            if user is None:
                return False
            await repo.revoke_refresh_token(user)
        return True

    async def setup_admin_user(
            self,
            repo: UserRepository,
            username: str,
            email: str,
            password: str,
            full_name: str = "Admin User",
    ) -> User:
        """Создать администратора или повысить существующую учётку до admin (идемпотентно)."""
        async with store_operation(repo.db, "поиск администратора"):
            user = await repo.get_by_identifier(username) or await repo.get_by_identifier(email)
        if user is None:
            user = User(
                username=username,
                email=email,
                password_hash=self.hash_password(password),
                full_name=full_name,
                role=RoleEnum.admin,
                start_date=date.today(),
                created_at=datetime.utcnow(),
            )
            logger.info(f"Создан администратор {username}")
            async with store_operation(repo.db, "создание администратора"):
                return await repo.create_user(user)

        user.role = RoleEnum.admin
        user.password_hash = self.hash_password(password)
        logger.info(f"Учётная запись {user.username} переведена в роль admin")
        async with store_operation(repo.db, "повышение до администратора"):
            return await repo.save(user)


# Создаем экземпляр сервиса для импорта
auth_service = AuthService()
