"""
Google OAuth client.

Authorization URL construction, authorization-code exchange and userinfo
lookup against Google's OAuth 2.0 endpoints.
"""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.core.exceptions import UpstreamOAuthException
from app.schemas.auth_schemas import GoogleUser

logger = logging.getLogger(__name__)

AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"

SCOPES = [
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
]


class GoogleOAuthService:
    """
    Talks to Google to turn an authorization code into a profile.

    Pass client to share a connection pool (or a mock transport in tests);
    otherwise a short-lived client is opened per request.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self.client_id = settings.GOOGLE_CLIENT_ID
        self.client_secret = settings.GOOGLE_CLIENT_SECRET
        self.redirect_url = settings.GOOGLE_REDIRECT_URL
        self.timeout = settings.GOOGLE_HTTP_TIMEOUT
        self._client = client

    def auth_code_url(self, state: str) -> str:
        """Google authorization URL bound to the anti-forgery state."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_url,
            "response_type": "code",
            "scope": " ".join(SCOPES),
            "state": state,
            "access_type": "offline",
        }
        return f"{AUTH_URL}?{urlencode(params)}"

    async def exchange(self, code: str) -> str:
        """
        Exchange an authorization code for an access token.

        Raises:
            UpstreamOAuthException: On transport errors, non-2xx responses or
                a response without access_token
        """
        body = await self._request(
            "POST",
            TOKEN_URL,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": self.redirect_url,
            },
            headers={"Accept": "application/json"},
        )
        access_token = body.get("access_token")
        if not access_token:
            raise UpstreamOAuthException("google token response missing access_token")
        return access_token

    async def fetch_user_info(self, access_token: str) -> GoogleUser:
        """Retrieve the Google profile for access_token."""
        body = await self._request(
            "GET", USERINFO_URL, headers={"Authorization": f"Bearer {access_token}"}
        )
        try:
            return GoogleUser.model_validate(body)
        except ValidationError as e:
            raise UpstreamOAuthException("failed to decode google user info") from e

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        own = self._client or httpx.AsyncClient(timeout=self.timeout)
        try:
            response = await own.request(method, url, **kwargs)
            if response.status_code != 200:
                logger.warning("Google %s %s returned %s", method, url, response.status_code)
                raise UpstreamOAuthException(f"google api returned status {response.status_code}")
            body = response.json()
        except httpx.HTTPError as e:
            logger.warning("Google %s %s failed: %s", method, url, e)
            raise UpstreamOAuthException(f"google request failed: {e}") from e
        except ValueError as e:
            raise UpstreamOAuthException("google returned a malformed response") from e
        finally:
            if self._client is None:
                await own.aclose()

        if not isinstance(body, dict):
            raise UpstreamOAuthException("google returned a malformed response")
        return body
