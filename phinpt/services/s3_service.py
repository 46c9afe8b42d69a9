"""
Изображения для контента сайта (hero/about, аватары и фото до/после в отзывах).

Файлы лежат в MinIO; в строку контента сохраняется публичный URL объекта.
"""
import logging
import uuid
from typing import Literal, get_args

from fastapi import UploadFile, HTTPException
from phinpt.core.config import settings

logger = logging.getLogger(__name__)

# content-type → расширение ключа; имя файла от браузера не используется
IMAGE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}
MAX_IMAGE_SIZE = 5 * 1024 * 1024

ImageFolder = Literal["home", "testimonials", "avatars"]
IMAGE_FOLDERS = get_args(ImageFolder)


def _get_session():
    import aiobotocore.session
    session = aiobotocore.session.get_session()
    return session.create_client(
        "s3",
        endpoint_url=f"http://{settings.MINIO_ENDPOINT}",
        aws_access_key_id=settings.MINIO_ACCESS_KEY,
        aws_secret_access_key=settings.MINIO_SECRET_KEY,
        region_name="us-east-1",
    )


async def ensure_bucket_exists() -> None:
    async with _get_session() as client:
        try:
            await client.head_bucket(Bucket=settings.MINIO_BUCKET)
        except Exception:
            logger.info(f"Создаём бакет {settings.MINIO_BUCKET}")
            await client.create_bucket(Bucket=settings.MINIO_BUCKET)


def check_image(content_type: str, content: bytes) -> str:
    """Проверить тип и размер, вернуть расширение для ключа."""
    ext = IMAGE_EXTENSIONS.get(content_type)
    if ext is None:
        raise HTTPException(
            status_code=415,
            detail="Chỉ chấp nhận ảnh JPEG, PNG, GIF hoặc WEBP",
        )
    if len(content) > MAX_IMAGE_SIZE:
        raise HTTPException(status_code=413, detail="Ảnh vượt quá 5 MB")
    return ext


def image_key(folder: str, ext: str) -> str:
    return f"{folder}/{uuid.uuid4().hex}.{ext}"


def public_url(s3_key: str) -> str:
    return f"{settings.MINIO_PUBLIC_URL.rstrip('/')}/{settings.MINIO_BUCKET}/{s3_key}"


async def upload_image(file: UploadFile, folder: ImageFolder = "home") -> tuple[str, str, int]:
    """Сохранить изображение. Возвращает (s3_key, content_type, size)."""
    content = await file.read()
    ext = check_image(file.content_type, content)
    s3_key = image_key(folder, ext)

    async with _get_session() as client:
        await client.put_object(
            Bucket=settings.MINIO_BUCKET,
            Key=s3_key,
            Body=content,
            ContentType=file.content_type,
        )

    logger.info(f"Загружено изображение {s3_key} ({len(content)} байт)")
    return s3_key, file.content_type, len(content)


def check_image_key(s3_key: str) -> None:
    """Ключ должен лежать в одной из папок изображений."""
    if s3_key.split("/", 1)[0] not in IMAGE_FOLDERS:
        raise HTTPException(status_code=400, detail="Khóa ảnh không hợp lệ")


async def generate_presigned_url(s3_key: str, expires: int = 3600) -> str:
    check_image_key(s3_key)
    async with _get_session() as client:
        return await client.generate_presigned_url(
            "get_object",
            Params={"Bucket": settings.MINIO_BUCKET, "Key": s3_key},
            ExpiresIn=expires,
        )


async def delete_image(s3_key: str) -> None:
    """Удалить объект; ключи вне папок изображений не трогаем."""
    check_image_key(s3_key)
    async with _get_session() as client:
        await client.delete_object(Bucket=settings.MINIO_BUCKET, Key=s3_key)
    logger.info(f"Удалено изображение {s3_key}")
