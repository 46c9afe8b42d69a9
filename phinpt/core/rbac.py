import logging

from fastapi import Depends, HTTPException, status

from phinpt.core.dependencies import get_current_user
from phinpt.models.user import User, RoleEnum

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "Bạn không có quyền thực hiện thao tác này"


def require_role(*allowed_roles: RoleEnum):
    """Зависимость, пропускающая только пользователей с одной из указанных ролей."""
    allowed = frozenset(allowed_roles)

    async def check_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role in allowed:
            return current_user
        logger.warning(f"Отказ в доступе: {current_user.username} ({current_user.role.value})")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)

    return check_role


# Панель тренера
require_admin = require_role(RoleEnum.admin)
# Личный кабинет; тренер тоже может открыть его под своей учёткой
require_client = require_role(RoleEnum.client, RoleEnum.admin)
