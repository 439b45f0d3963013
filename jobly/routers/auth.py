# jobly/routers/auth.py
from fastapi import APIRouter

from jobly.auth.jwt import create_access_token
from jobly.core.config import settings
from jobly.core.error_reasons import ErrorReason
from jobly.core.errors import unauthorized
from jobly.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest) -> LoginResponse:
    if req.username != settings.ADMIN_USERNAME or req.password != settings.ADMIN_PASSWORD:
        raise unauthorized("Invalid credentials", reason=ErrorReason.AUTH_INVALID)

    token = create_access_token(subject=settings.ADMIN_USERNAME)
    return LoginResponse(
        access_token=token,
        expires_in_minutes=settings.JWT_ACCESS_TOKEN_EXPIRES_MINUTES,
    )
