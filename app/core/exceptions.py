class UserAuthException(Exception):
    """Base exception for the user auth API"""

    pass


class UnauthorizedException(UserAuthException):
    """Raised when a request cannot be authenticated"""

    pass


class InvalidCredentialsException(UnauthorizedException):
    """Raised when email/password login fails.

    Unknown email and wrong password use the same message so callers cannot
    tell which emails are registered.
    """

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)


class InvalidTokenException(UnauthorizedException):
    """Raised when JWT validation fails"""

    pass


class NotFoundException(UserAuthException):
    """Raised when resource not found"""

    pass


class ForbiddenException(UserAuthException):
    """Raised when user tries to modify another user's account"""

    pass


class ValidationException(UserAuthException):
    """Raised for business logic validation errors"""

    pass


class DuplicateEmailException(ValidationException):
    """Raised when an email is already registered"""

    def __init__(self, message: str = "email already registered"):
        super().__init__(message)


class UpstreamOAuthException(UserAuthException):
    """Raised when the OAuth code exchange or profile fetch fails"""

    pass


class OAuthNotConfiguredException(UserAuthException):
    """Raised when an OAuth route is called without client credentials"""

    def __init__(self, message: str = "google oauth is not configured"):
        super().__init__(message)


class InternalException(UserAuthException):
    """Raised for failures not attributable to caller input"""

    pass


class HashingException(InternalException):
    """Raised when the password hashing backend fails"""

    pass


class MalformedHashException(InternalException):
    """Raised when a stored password hash is not a valid bcrypt hash"""

    pass
