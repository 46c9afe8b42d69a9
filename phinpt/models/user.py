import enum

from sqlalchemy import Column, String, Enum, Date, DateTime

from phinpt.core.base import Base, uuid_pk, created_at_column, updated_at_column


class RoleEnum(str, enum.Enum):
    admin = "admin"
    client = "client"


class User(Base):
    __tablename__ = "users"

    id = uuid_pk()
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    role = Column(Enum(RoleEnum), default=RoleEnum.client, nullable=False)
    avatar = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    refresh_token = Column(String, nullable=True, index=True)
    refresh_token_expires = Column(DateTime, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()

    @property
    def is_admin(self) -> bool:
        return self.role == RoleEnum.admin
