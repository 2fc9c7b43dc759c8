"""
Auth API endpoints.

Route prefix: /api/auth
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    LoginRequest,
    MeData,
    MeResponse,
    RegisterRequest,
)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user."""
    data = await service.register(request)
    return AuthResponse(message="User registered successfully", data=data)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Login with email + password."""
    data = await service.login(request)
    return AuthResponse(message="Login successful", data=data)


@router.get("/me", response_model=MeResponse)
async def me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> MeResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    profile = await service.get_user(user.id)
    return MeResponse(message="Current user", data=MeData(user=profile))
