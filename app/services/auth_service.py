import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.config import Settings
from app.core.exceptions import DuplicateEmailException, InvalidCredentialsException
from app.core.passwords import hash_password, verify_password
from app.core.security import TokenService
from app.models.claims import Claims
from app.models.user import AuthProvider, User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Service for registration, login and OAuth account linking"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.repo = UserRepository(db)
        self.tokens = TokenService(settings)

    def register(self, name: str, email: str, password: str) -> User:
        """
        Create a password account.

        Raises:
            HashingException: If the password cannot be hashed
            DuplicateEmailException: If the email is already registered
        """
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            provider=AuthProvider.LOCAL.value,
            provider_id="",
        )

        # The unique index decides concurrent registrations for the same email
        try:
            user = self.repo.create(user)
        except IntegrityError as e:
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmailException() from e

        logger.info("Registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> tuple[str, User]:
        """
        Authenticate with email and password.

        Returns:
            (access token, user)

        Raises:
            InvalidCredentialsException: Unknown email or wrong password
            MalformedHashException: If the stored hash is corrupt
        """
        user = self.repo.get_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsException()

        if not verify_password(password, user.password_hash):
            logger.info("Login failed for user %s", user.id)
            raise InvalidCredentialsException()

        return self.generate_token(user), user

    def find_or_create_oauth_user(
        self, name: str, email: str, provider: str, provider_id: str
    ) -> User:
        """
        Resolve an OAuth identity to a user, linking or creating as needed.

        - Existing user with empty provider: provider fields are backfilled.
        - Existing user with a provider already set: returned unchanged.
        - No user with this email: a new user without password is created.

        Linking trusts the provider's email claim; callers must only pass
        emails the provider reports as verified.
        """
        user = self.repo.get_by_email(email)
        if user is not None:
            if not user.provider:
                user.provider = provider
                user.provider_id = provider_id
                user = self.repo.update(user)
                logger.info("Linked %s identity to user %s", provider, user.id)
            return user

        user = User(
            name=name,
            email=email,
            password_hash=None,
            provider=provider,
            provider_id=provider_id,
        )
        user = self.repo.create(user)
        logger.info("Created user %s from %s login", user.id, provider)
        return user

    def generate_token(self, user: User) -> str:
        """Issue an access token for user"""
        return self.tokens.issue(user)

    def parse_token(self, token: str) -> Claims:
        """Validate an access token and return its claims"""
        return self.tokens.parse(token)
