"""Routes handling registration and login."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import SettingsDependency
from ...schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserPublic
from ...services import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register(payload: RegisterRequest, settings: SettingsDependency) -> RegisterResponse:
    service = AuthService(settings)
    result = await service.register(
        user_name=payload.user_name,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        password=payload.password,
    )
    return RegisterResponse(user=UserPublic.from_document(result.user), token=result.token.token)


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate with user name and password",
)
async def login(payload: LoginRequest, settings: SettingsDependency) -> LoginResponse:
    service = AuthService(settings)
    result = await service.login(payload.user_name, payload.password)
    return LoginResponse(token=result.token.token, user_name=result.user.user_name)
