from fastapi import APIRouter, Depends, HTTPException, status, Response

from phinpt.core.dependencies import get_current_user, get_user_repository
from phinpt.models.user import User
from phinpt.repositories.user_repository import UserRepository
from phinpt.schemas.auth import UserLogin, UserRegister, AuthResponse, RefreshTokenRequest
from phinpt.schemas.user import UserRead
from phinpt.services.auth_service import auth_service

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, repo: UserRepository = Depends(get_user_repository)):
    """Вход по username или email и выдача JWT токенов"""
    user = await auth_service.authenticate_user(repo, credentials)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Tên đăng nhập hoặc mật khẩu không đúng",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return await auth_service.issue_tokens(repo, user)


@router.post("/register", response_model=AuthResponse)
async def register(data: UserRegister, repo: UserRepository = Depends(get_user_repository)):
    """Регистрация клиента и выдача JWT токенов"""
    new_user = await auth_service.register_user(repo, data)
    return await auth_service.issue_tokens(repo, new_user)


@router.post("/refresh", response_model=AuthResponse)
async def refresh_token(request: RefreshTokenRequest, repo: UserRepository = Depends(get_user_repository)):
    """Ротация refresh-токена"""
    tokens = await auth_service.rotate_refresh_token(repo, request.refresh_token)
    if tokens is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Phiên đăng nhập đã hết hạn, vui lòng đăng nhập lại"
        )
    return tokens


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: RefreshTokenRequest, repo: UserRepository = Depends(get_user_repository)):
    """Выход: серверная сессия аннулируется, ответ 204 при любом токене"""
    await auth_service.logout_user(repo, request.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserRead)
async def me(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)
