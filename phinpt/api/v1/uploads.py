from fastapi import APIRouter, Depends, UploadFile, File, Query, status

from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.schemas.upload import UploadResponse
from phinpt.services import s3_service

router = APIRouter(tags=["uploads"])


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile = File(...),
    folder: s3_service.ImageFolder = Query("home"),
    current_user: User = Depends(require_admin),
):
    """Загрузить изображение; url сохраняется в поле контента (hero_image, avatar, ...)"""
    s3_key, content_type, size = await s3_service.upload_image(file, folder)
    return UploadResponse(
        key=s3_key,
        url=s3_service.public_url(s3_key),
        content_type=content_type,
        size=size,
    )


@router.get("/url")
async def get_presigned_url(
    key: str = Query(..., min_length=1),
    current_user: User = Depends(require_admin),
):
    url = await s3_service.generate_presigned_url(key, expires=3600)
    return {"url": url, "expires_in": 3600}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    key: str = Query(..., min_length=1),
    current_user: User = Depends(require_admin),
):
    await s3_service.delete_image(key)
