import os

# Configure the app before it is imported: in-memory database, known secret,
# Google OAuth disabled unless a test enables it.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ISSUER"] = "test-issuer"
os.environ["TOKEN_EXPIRE_MINUTES"] = "15"
os.environ["GOOGLE_CLIENT_ID"] = ""
os.environ["GOOGLE_CLIENT_SECRET"] = ""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings as app_settings
from app.database import get_db
from app.dependencies import get_google_service
from app.models.base import Base
from app.models.user import User
from app.services.auth_service import AuthService
from app.services.google_oauth_service import GoogleOAuthService
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

GOOGLE_PROFILE = {
    "id": "google-sub-123",
    "email": "bob@example.com",
    "verified_email": True,
    "name": "Bob",
    "given_name": "Bob",
    "family_name": "Builder",
    "picture": "https://example.com/bob.png",
}


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    """Opens extra sessions on the test database; all are closed afterwards"""
    sessions = []

    def factory():
        session = TestingSessionLocal()
        sessions.append(session)
        return session

    yield factory
    for session in sessions:
        session.close()


@pytest.fixture
def settings():
    """Settings the app was configured with"""
    return app_settings


@pytest.fixture
def auth_service(db_session, settings):
    return AuthService(db_session, settings)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def google_settings(settings):
    """Settings with Google OAuth credentials filled in"""
    return settings.model_copy(
        update={"GOOGLE_CLIENT_ID": "client-id", "GOOGLE_CLIENT_SECRET": "client-secret"}
    )


@pytest.fixture
def google_profile():
    """Mutable copy of the profile the mocked Google returns"""
    return dict(GOOGLE_PROFILE)


@pytest.fixture
def google_requests():
    """Requests received by the mocked Google endpoints"""
    return []


@pytest.fixture
def google_transport(google_profile, google_requests):
    """
    Mock Google token and userinfo endpoints.

    Code "bad-code" is rejected by the token endpoint.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        google_requests.append(request)
        if request.url.host == "oauth2.googleapis.com":
            if b"code=bad-code" in request.content:
                return httpx.Response(400, json={"error": "invalid_grant"})
            return httpx.Response(200, json={"access_token": "google-access-token"})
        if request.url.path == "/oauth2/v2/userinfo":
            if request.headers.get("Authorization") != "Bearer google-access-token":
                return httpx.Response(401, json={"error": "unauthorized"})
            return httpx.Response(200, json=google_profile)
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def google_service(google_settings, google_transport):
    return GoogleOAuthService(google_settings, client=httpx.AsyncClient(transport=google_transport))


@pytest.fixture
def google_client(client, google_service):
    """Test client with Google OAuth enabled against the mock endpoints"""
    app.dependency_overrides[get_google_service] = lambda: google_service
    yield client
    app.dependency_overrides.pop(get_google_service, None)


@pytest.fixture
def registered_user(auth_service) -> User:
    """Alice, registered with a password"""
    return auth_service.register("Alice", "alice@example.com", "Password123")


@pytest.fixture
def auth_headers(auth_service, registered_user):
    """Authorization headers for Alice"""
    token = auth_service.generate_token(registered_user)
    return {"Authorization": f"Bearer {token}"}
