"""Token claims carried by issued access tokens."""

from dataclasses import dataclass
from datetime import datetime, UTC


@dataclass
class Claims:
    """
    Identity asserted by a signed access token.

    Built from a User when a token is issued and recovered from the token
    when it is parsed. Never persisted.

    Attributes:
        user_id: The user's id as a string
        email: The user's email at issuance time
        name: The user's display name at issuance time
        issuer: Configured JWT issuer ('iss')
        subject: Same as user_id ('sub')
        issued_at: Issuance time ('iat')
        expires_at: Expiry time ('exp')
    """

    user_id: str
    email: str
    name: str
    issuer: str
    subject: str
    issued_at: datetime
    expires_at: datetime

    def to_payload(self) -> dict:
        """Encode as a JWT payload with NumericDate timestamps."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "iss": self.issuer,
            "sub": self.subject,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }

    @classmethod
    def from_payload(cls, payload: dict) -> "Claims":
        """
        Build claims from a decoded JWT payload.

        Raises:
            KeyError: If a required claim is missing
        """
        return cls(
            user_id=payload["user_id"],
            email=payload["email"],
            name=payload.get("name", ""),
            issuer=payload["iss"],
            subject=payload["sub"],
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Tokens are valid only while expires_at is strictly in the future."""
        now = now or datetime.now(UTC)
        return self.expires_at <= now

    def __repr__(self) -> str:
        return f"<Claims(user_id={self.user_id}, email={self.email}, exp={self.expires_at.isoformat()})>"
