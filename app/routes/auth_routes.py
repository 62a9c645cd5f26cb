import logging
import secrets
from fastapi import APIRouter, Depends, status

from app.dependencies import get_auth_service, get_google_service
from app.core.exceptions import (
    OAuthNotConfiguredException,
    UpstreamOAuthException,
    ValidationException,
)
from app.models.user import AuthProvider
from app.services.auth_service import AuthService
from app.services.google_oauth_service import GoogleOAuthService
from app.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    GoogleLoginResponse,
)
from app.schemas.user_schemas import UserEnvelope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Create a password account"""
    user = service.register(data.name, data.email, data.password)
    return {"user": user}


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Exchange email and password for an access token"""
    token, user = service.login(data.email, data.password)
    return {"token": token, "user": user}


@router.get("/google/login", response_model=GoogleLoginResponse)
async def google_login(google: GoogleOAuthService | None = Depends(get_google_service)):
    """Start the Google OAuth flow; the caller keeps state to check on callback"""
    if google is None:
        raise OAuthNotConfiguredException()

    state = secrets.token_urlsafe(24)
    return {"auth_url": google.auth_code_url(state), "state": state}


@router.get("/google/callback", response_model=TokenResponse)
async def google_callback(
    code: str | None = None,
    google: GoogleOAuthService | None = Depends(get_google_service),
    service: AuthService = Depends(get_auth_service),
):
    """Finish the Google OAuth flow: exchange code, link or create user, issue token"""
    if google is None:
        raise OAuthNotConfiguredException()
    if not code:
        raise ValidationException("code query param missing")

    access_token = await google.exchange(code)
    profile = await google.fetch_user_info(access_token)

    # Linking matches on email, so only accept addresses Google has verified
    if not profile.verified_email:
        logger.warning("Rejected Google login for unverified email, google id %s", profile.id)
        raise UpstreamOAuthException("google account email is not verified")

    user = service.find_or_create_oauth_user(
        profile.name, profile.email, AuthProvider.GOOGLE.value, profile.id
    )
    token = service.generate_token(user)
    return {"token": token, "user": user}
