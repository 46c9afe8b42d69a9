import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

GENERIC_STORE_MESSAGE = "Có lỗi xảy ra khi xử lý dữ liệu"


class DataError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StoreError(DataError):
    """Удалённое хранилище не выполнило запрос (сеть, валидация, права)."""

    def __init__(self, operation: str):
        super().__init__(GENERIC_STORE_MESSAGE)
        self.operation = operation


class NotFoundError(DataError):
    status_code = status.HTTP_404_NOT_FOUND


class PreconditionError(DataError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(DataError):
    status_code = status.HTTP_400_BAD_REQUEST


@asynccontextmanager
async def store_operation(db: AsyncSession, operation: str):
    """Откатывает сессию и превращает любую ошибку SQLAlchemy в StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Ошибка хранилища ({operation}): {e}")
        raise StoreError(operation) from e


async def data_error_handler(request: Request, exc: DataError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DataError, data_error_handler)
