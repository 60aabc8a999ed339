import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Set required environment variables for testing
os.environ["API_V1_STR"] = "/api/v1"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from coopboard.main import app
from coopboard.database import get_db
from coopboard.models.base import Base
from coopboard.models.family import Family
from coopboard.core.context import AuthContext

TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """
    Create a database session for the test and route the app through it.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )
    session = TestingSessionLocal()

    def override_get_db():
        try:
            yield session
        finally:
            pass  # Don't close here, we'll handle it after the test

    app.dependency_overrides[get_db] = override_get_db
    yield session

    # Cleanup
    session.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(db_session):
    """Create a FastAPI TestClient with database session override."""
    with TestClient(app) as c:
        yield c


def _make_family(db_session, username: str, display_name: str, is_admin: bool = False) -> Family:
    family = Family(username=username, display_name=display_name, is_admin=is_admin)
    db_session.add(family)
    db_session.commit()
    db_session.refresh(family)
    return family


@pytest.fixture
def family_factory(db_session):
    """Create seeded families on demand."""
    def factory(username: str, display_name: str | None = None, is_admin: bool = False) -> Family:
        return _make_family(db_session, username, display_name or username.title(), is_admin)
    return factory


@pytest.fixture
def rossi(family_factory):
    return family_factory("rossi", "Rossi")


@pytest.fixture
def bianchi(family_factory):
    return family_factory("bianchi", "Bianchi")


@pytest.fixture
def verdi(family_factory):
    return family_factory("verdi", "Verdi")


@pytest.fixture
def admin(family_factory):
    return family_factory("segreteria", "Segreteria", is_admin=True)


@pytest.fixture
def rossi_ctx(rossi):
    return AuthContext.from_family(rossi)


@pytest.fixture
def bianchi_ctx(bianchi):
    return AuthContext.from_family(bianchi)


@pytest.fixture
def verdi_ctx(verdi):
    return AuthContext.from_family(verdi)


@pytest.fixture
def admin_ctx(admin):
    return AuthContext.from_family(admin)


def _login_headers(client, username: str) -> dict:
    response = client.post("/api/v1/auth/login", json={"username": username})
    return {"Authorization": f"Bearer {response.json()['data']['access_token']}"}


@pytest.fixture
def auth_headers(client, rossi):
    """Authorization headers for a regular family."""
    return _login_headers(client, rossi.username)


@pytest.fixture
def other_headers(client, bianchi):
    """Authorization headers for a second regular family."""
    return _login_headers(client, bianchi.username)


@pytest.fixture
def admin_headers(client, admin):
    """Authorization headers for an admin family."""
    return _login_headers(client, admin.username)
