from typing import List

from fastapi import APIRouter, Depends, status

from phinpt.core.dependencies import get_testimonial_service, get_video_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.schemas.content import (
    TestimonialCreate,
    TestimonialUpdate,
    TestimonialRead,
    VideoCreate,
    VideoUpdate,
    VideoRead,
)
from phinpt.services.content_service import TestimonialService, VideoService

testimonials_router = APIRouter(tags=["testimonials"])
videos_router = APIRouter(tags=["videos"])


# ==========================
# ОТЗЫВЫ
# ==========================

@testimonials_router.get("", response_model=List[TestimonialRead])
async def list_testimonials(
    current_user: User = Depends(require_admin),
    service: TestimonialService = Depends(get_testimonial_service),
):
    return await service.list_items()


@testimonials_router.post("", response_model=TestimonialRead, status_code=status.HTTP_201_CREATED)
async def add_testimonial(
    data: TestimonialCreate,
    current_user: User = Depends(require_admin),
    service: TestimonialService = Depends(get_testimonial_service),
):
    return await service.add_item(data)


@testimonials_router.put("/{testimonial_id}", response_model=TestimonialRead)
async def update_testimonial(
    testimonial_id: str,
    data: TestimonialUpdate,
    current_user: User = Depends(require_admin),
    service: TestimonialService = Depends(get_testimonial_service),
):
    return await service.update_item(testimonial_id, data)


@testimonials_router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_testimonial(
    testimonial_id: str,
    current_user: User = Depends(require_admin),
    service: TestimonialService = Depends(get_testimonial_service),
):
    await service.delete_item(testimonial_id)


# ==========================
# ВИДЕО
# ==========================

@videos_router.get("", response_model=List[VideoRead])
async def list_videos(
    current_user: User = Depends(require_admin),
    service: VideoService = Depends(get_video_service),
):
    return await service.list_items()


@videos_router.post("", response_model=VideoRead, status_code=status.HTTP_201_CREATED)
async def add_video(
    data: VideoCreate,
    current_user: User = Depends(require_admin),
    service: VideoService = Depends(get_video_service),
):
    return await service.add_item(data)


@videos_router.put("/{video_id}", response_model=VideoRead)
async def update_video(
    video_id: str,
    data: VideoUpdate,
    current_user: User = Depends(require_admin),
    service: VideoService = Depends(get_video_service),
):
    return await service.update_item(video_id, data)


@videos_router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: str,
    current_user: User = Depends(require_admin),
    service: VideoService = Depends(get_video_service),
):
    await service.delete_item(video_id)
