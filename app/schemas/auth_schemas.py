from pydantic import BaseModel, EmailStr, Field, field_validator
from app.core.passwords import BCRYPT_MAX_BYTES, password_too_long
from app.schemas.user_schemas import UserResponse


class RegisterRequest(BaseModel):
    """Schema for password registration"""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Schema for email/password login"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Schema for a successful login"""

    token: str
    user: UserResponse


class GoogleLoginResponse(BaseModel):
    """Schema for the start of the Google OAuth flow"""

    auth_url: str
    state: str


class GoogleUser(BaseModel):
    """Profile returned by Google's userinfo endpoint"""

    id: str
    email: str
    verified_email: bool = False
    name: str = ""
    given_name: str = ""
    family_name: str = ""
    picture: str = ""
