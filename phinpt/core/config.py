from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Обязательные: без адреса хранилища и ключа подписи приложение не стартует
    DATABASE_URL: str
    SECRET_KEY: str

    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False
    DB_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # true: первая же ошибка при начальной загрузке коллекций прерывает всю загрузку
    STRICT_INITIAL_LOAD: bool = False

    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_FULL_NAME: str = "Admin User"

    MINIO_ENDPOINT: str = "minio:9000"
    MINIO_ACCESS_KEY: str = "minioadmin"
    MINIO_SECRET_KEY: str = "minioadmin"
    MINIO_BUCKET: str = "phinpt-images"
    MINIO_PUBLIC_URL: str = "http://localhost:9000"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    @property
    def REFRESH_SECRET_KEY(self) -> str:
        return self.SECRET_KEY + "_refresh"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
