"""Публичная часть сайта: только чтение."""
from typing import List

from fastapi import APIRouter, Depends

from phinpt.core.dependencies import (
    get_site_loader,
    get_settings_service,
    get_testimonial_service,
    get_video_service,
)
from phinpt.schemas.content import TestimonialRead, VideoRead
from phinpt.schemas.site import SiteSnapshot
from phinpt.schemas.site_settings import ContactInfoRead, HomeContentRead
from phinpt.services.content_service import TestimonialService, VideoService
from phinpt.services.site_data_service import SiteDataLoader
from phinpt.services.site_settings_service import SiteSettingsService

router = APIRouter(tags=["site"])


@router.get("", response_model=SiteSnapshot)
async def site_snapshot(loader: SiteDataLoader = Depends(get_site_loader)):
    """Всё, что нужно публичной странице, одним запросом"""
    return await loader.load_site()


@router.get("/home", response_model=HomeContentRead)
async def home_content(service: SiteSettingsService = Depends(get_settings_service)):
    return await service.get_home_content()


@router.get("/contact", response_model=ContactInfoRead)
async def contact_info(service: SiteSettingsService = Depends(get_settings_service)):
    return await service.get_contact_info()


@router.get("/testimonials", response_model=List[TestimonialRead])
async def testimonials(service: TestimonialService = Depends(get_testimonial_service)):
    return await service.list_items()


@router.get("/videos", response_model=List[VideoRead])
async def videos(service: VideoService = Depends(get_video_service)):
    return await service.list_items()
