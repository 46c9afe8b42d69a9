from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from phinpt.core.dependencies import get_weight_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.schemas.weight import WeightRecordCreate, WeightRecordRead
from phinpt.services.weight_service import WeightRecordService

router = APIRouter(tags=["weight-records"])


@router.get("", response_model=List[WeightRecordRead])
async def list_weight_records(
    client_id: Optional[str] = Query(None),
    current_user: User = Depends(require_admin),
    service: WeightRecordService = Depends(get_weight_service),
):
    return await service.list_records(client_id=client_id)


@router.post("", response_model=WeightRecordRead, status_code=status.HTTP_201_CREATED)
async def add_weight_record(
    data: WeightRecordCreate,
    current_user: User = Depends(require_admin),
    service: WeightRecordService = Depends(get_weight_service),
):
    return await service.add_record(data)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_weight_record(
    record_id: str,
    current_user: User = Depends(require_admin),
    service: WeightRecordService = Depends(get_weight_service),
):
    await service.delete_record(record_id)
