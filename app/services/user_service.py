import uuid
from sqlalchemy.orm import Session
from app.models.claims import Claims
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user_schemas import UserUpdate
from app.core.exceptions import ForbiddenException, NotFoundException


class UserService:
    """Service for user management"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)

    def list_users(self) -> list[User]:
        """Get all users"""
        return self.repo.list()

    def get_user(self, user_id: uuid.UUID) -> User:
        """
        Get user by ID.

        Raises:
            NotFoundException: If user not found
        """
        user = self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundException("User not found")
        return user

    def _get_own_user(self, user_id: uuid.UUID, claims: Claims) -> User:
        user = self.get_user(user_id)
        if str(user.id) != claims.user_id:
            raise ForbiddenException("Users can only modify their own account")
        return user

    def update_user(self, user_id: uuid.UUID, data: UserUpdate, claims: Claims) -> User:
        """Update the authenticated user's name"""
        user = self._get_own_user(user_id, claims)
        user.name = data.name
        return self.repo.update(user)

    def delete_user(self, user_id: uuid.UUID, claims: Claims) -> None:
        """Delete the authenticated user's account"""
        user = self._get_own_user(user_id, claims)
        self.repo.delete(user)
