import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from phinpt.core.errors import NotFoundError, PreconditionError, store_operation
from phinpt.models.user import User
from phinpt.models.weight import WeightRecord
from phinpt.schemas.weight import WeightRecordCreate

logger = logging.getLogger(__name__)


class WeightRecordService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_records(self, client_id: Optional[str] = None) -> List[WeightRecord]:
        query = select(WeightRecord).order_by(WeightRecord.date.desc(), WeightRecord.created_at.desc())
        if client_id is not None:
            query = query.where(WeightRecord.client_id == client_id)

        async with store_operation(self.db, "загрузка записей веса"):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def add_record(self, data: WeightRecordCreate) -> WeightRecord:
        async with store_operation(self.db, "проверка клиента"):
            client = await self.db.get(User, data.client_id)
        if client is None:
            raise PreconditionError(f"Không tìm thấy khách hàng {data.client_id}")

        record = WeightRecord(**data.model_dump())
        async with store_operation(self.db, "добавление записи веса"):
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        return record

    async def delete_record(self, record_id: str) -> None:
        async with store_operation(self.db, "удаление записи веса"):
            record = await self.db.get(WeightRecord, record_id)
            if record is None:
                raise NotFoundError("Không tìm thấy bản ghi cân nặng")
            await self.db.delete(record)
            await self.db.commit()
