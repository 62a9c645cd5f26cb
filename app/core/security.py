from datetime import datetime, timedelta, UTC
from jose import JWTError, jwt
from app.config import Settings
from app.core.exceptions import InvalidTokenException
from app.models.claims import Claims
from app.models.user import User

ALGORITHM = "HS256"

_DECODE_OPTIONS = {
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
    "require_iss": True,
}


class TokenService:
    """Issues and validates HS256-signed access tokens"""

    def __init__(self, settings: Settings):
        self.secret = settings.JWT_SECRET
        self.issuer = settings.JWT_ISSUER
        self.ttl = timedelta(minutes=settings.TOKEN_EXPIRE_MINUTES)

    def issue(self, user: User) -> str:
        """
        Create a signed access token for user.

        Tokens are not revocable: they stay valid until 'exp' even if the
        user is later deleted.
        """
        now = datetime.now(UTC)
        claims = Claims(
            user_id=str(user.id),
            email=user.email,
            name=user.name,
            issuer=self.issuer,
            subject=str(user.id),
            issued_at=now,
            expires_at=now + self.ttl,
        )
        return jwt.encode(claims.to_payload(), self.secret, algorithm=ALGORITHM)

    def parse(self, token: str) -> Claims:
        """
        Decode and validate an access token.

        Args:
            token: JWT access token from Authorization header

        Returns:
            Claims recovered from the token

        Raises:
            InvalidTokenException: If token invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[ALGORITHM],
                issuer=self.issuer,
                options=_DECODE_OPTIONS,
            )
        except JWTError as e:
            raise InvalidTokenException(f"Invalid token: {str(e)}") from e

        try:
            claims = Claims.from_payload(payload)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenException("Invalid token: malformed claims") from e

        if claims.subject != claims.user_id:
            raise InvalidTokenException("Invalid token: subject mismatch")

        # jose allows exp == now; expiry here is strict
        if claims.is_expired():
            raise InvalidTokenException("Invalid token: Signature has expired.")

        return claims
