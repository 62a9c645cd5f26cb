import uuid
from datetime import datetime
from pydantic import BaseModel, Field


class UserUpdate(BaseModel):
    """Schema for updating a user"""

    name: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Schema for user response (never includes the password hash)"""

    id: uuid.UUID
    name: str
    email: str
    provider: str
    provider_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserEnvelope(BaseModel):
    """Schema wrapping a single user"""

    user: UserResponse


class UserListResponse(BaseModel):
    """Schema for list of users"""

    users: list[UserResponse]
    total: int
