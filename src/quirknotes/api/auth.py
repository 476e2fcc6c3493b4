"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import UserRepository
from ..core.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..security import PasswordHasher, TokenIssuer
from .deps import get_db_session, get_password_hasher, get_token_issuer

router = APIRouter(tags=["authentication"])


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(UserRepository(session), hasher, tokens)


@router.post(
    "/registerUser",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user."""
    token = await auth_service.register(request.username, request.password)
    return TokenResponse(response="User registered successfully.", token=token)


@router.post(
    "/loginUser",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get a JWT token."""
    token = await auth_service.login(request.username, request.password)
    return TokenResponse(response="User logged in successfully.", token=token)
