# jobly/auth/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.auth.jwt import decode_access_token
from jobly.core.config import settings
from jobly.core.errors import forbidden, unauthorized

bearer = HTTPBearer(auto_error=False)

def require_admin_token(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> dict:
    """Guard for mutating routes: a valid token issued to the configured admin."""
    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise unauthorized("Missing Authorization: Bearer token")

    payload = decode_access_token(creds.credentials)

    # Single-admin check
    if payload.get("sub") != settings.ADMIN_USERNAME:
        raise forbidden()

    return payload
