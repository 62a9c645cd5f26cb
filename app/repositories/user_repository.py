import uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        """Get user by email (the login and account-linking key)"""
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: uuid.UUID) -> User | None:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def list(self) -> list[User]:
        """Get all users, oldest first"""
        return self.db.query(User).order_by(User.created_at).all()

    def create(self, user: User) -> User:
        """
        Create new user.

        Raises:
            IntegrityError: If the email is already taken. The session is
                rolled back before re-raising so it stays usable.
        """
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def update(self, user: User) -> User:
        """Update existing user"""
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Delete user"""
        self.db.delete(user)
        self.db.commit()
