from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from phinpt.core.dependencies import get_site_loader, get_user_service
from phinpt.core.rbac import require_admin
from phinpt.models.user import User, RoleEnum
from phinpt.schemas.site import AdminDashboard
from phinpt.schemas.user import UserCreate, UserUpdate, UserRead
from phinpt.services.site_data_service import SiteDataLoader
from phinpt.services.user_service import UserService

router = APIRouter(tags=["admin"])


@router.get("/dashboard", response_model=AdminDashboard)
async def dashboard(
    current_user: User = Depends(require_admin),
    loader: SiteDataLoader = Depends(get_site_loader),
):
    """Начальная загрузка админ-панели: все коллекции параллельно"""
    return await loader.load_dashboard()


@router.get("/users", response_model=List[UserRead])
async def list_users(
    role: Optional[RoleEnum] = Query(None, description="Filter by role: admin|client"),
    current_user: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return [UserRead.model_validate(u) for u in await service.list_users(role)]


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def add_user(
    data: UserCreate,
    current_user: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return UserRead.model_validate(await service.add_user(data))


@router.put("/users/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    data: UserUpdate,
    current_user: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return UserRead.model_validate(await service.update_user(user_id, data))


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    current_user: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user_id, current_user)
