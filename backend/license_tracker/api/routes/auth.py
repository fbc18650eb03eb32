"""Auth API Routes - Registration and login"""
from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field

from ..deps import get_auth_service
from ...domain.models import CamelModel
from ...services.auth_service import AuthService
from ...utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================

class RegisterRequest(CamelModel):
    """Request to register a user"""
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(CamelModel):
    """Request to log in; loginId is the registered email"""
    login_id: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class RegisterResponse(CamelModel):
    message: str


class LoginResponse(CamelModel):
    token: str
    username: str


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a user with a hashed password"""
    user = service.register(request.username, request.email, request.password)
    logger.info(f"Registered user: {user.username}", extra={"user_id": user.user_id})
    return RegisterResponse(message="Registration successful!")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a bearer token"""
    token, user = service.login(request.login_id, request.password)
    return LoginResponse(token=token, username=user.username)
