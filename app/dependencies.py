from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.config import Settings, get_settings
from app.core.exceptions import UnauthorizedException
from app.core.security import TokenService
from app.database import get_db
from app.models.claims import Claims
from app.services.auth_service import AuthService
from app.services.google_oauth_service import GoogleOAuthService
from app.services.user_service import UserService

# auto_error=False so a missing header is reported as 401 by our own handler
security = HTTPBearer(auto_error=False)


def get_auth_service(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(db, settings)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_google_service(settings: Settings = Depends(get_settings)) -> GoogleOAuthService | None:
    """Google client, or None when GOOGLE_CLIENT_ID/SECRET are not configured."""
    if not settings.google_oauth_enabled:
        return None
    return GoogleOAuthService(settings)


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Claims:
    """
    FastAPI dependency to validate the bearer token.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate signature, algorithm, issuer and expiry
    3. Return the token's Claims

    The user row is not loaded: a token stays usable until it expires.

    Raises:
        UnauthorizedException: If header missing, token invalid or expired
    """
    if credentials is None:
        raise UnauthorizedException("authorization header missing")

    return TokenService(settings).parse(credentials.credentials)
