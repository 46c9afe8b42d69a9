from fastapi import APIRouter, Depends

from phinpt.core.dependencies import get_settings_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User
from phinpt.schemas.site_settings import (
    ContactInfoRead,
    ContactInfoUpdate,
    HomeContentRead,
    HomeContentUpdate,
)
from phinpt.services.site_settings_service import SiteSettingsService

router = APIRouter(tags=["settings"])


@router.get("/contact", response_model=ContactInfoRead)
async def get_contact_info(
    current_user: User = Depends(require_admin),
    service: SiteSettingsService = Depends(get_settings_service),
):
    return await service.get_contact_info()


@router.put("/contact", response_model=ContactInfoRead)
async def update_contact_info(
    data: ContactInfoUpdate,
    current_user: User = Depends(require_admin),
    service: SiteSettingsService = Depends(get_settings_service),
):
    return await service.update_contact_info(data)


@router.get("/home", response_model=HomeContentRead)
async def get_home_content(
    current_user: User = Depends(require_admin),
    service: SiteSettingsService = Depends(get_settings_service),
):
    return await service.get_home_content()


@router.put("/home", response_model=HomeContentRead)
async def update_home_content(
    data: HomeContentUpdate,
    current_user: User = Depends(require_admin),
    service: SiteSettingsService = Depends(get_settings_service),
):
    return await service.update_home_content(data)
