import uuid
from enum import Enum as PyEnum
from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin


class AuthProvider(str, PyEnum):
    """Known values of User.provider"""

    LOCAL = "local"
    GOOGLE = "google"


class User(Base, TimestampMixin):
    """
    Application user.

    Password accounts have provider "local" and a bcrypt password_hash.
    OAuth accounts carry the provider name and the provider-issued subject
    in provider_id, and have no password_hash unless linked onto an
    existing account.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Empty provider marks a record that OAuth login may link onto
    provider: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    provider_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, provider={self.provider})>"
