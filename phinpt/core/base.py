import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_uuid() -> str:
    return str(uuid.uuid4())


def uuid_pk() -> Column:
    """Первичный ключ в виде UUID-строки, как в удалённой схеме."""
    return Column(String(36), primary_key=True, default=new_uuid)


def created_at_column() -> Column:
    return Column(DateTime, default=datetime.utcnow, nullable=False)


def updated_at_column() -> Column:
    return Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
