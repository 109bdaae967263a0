"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before and dropped after every
test, and the API client shares the test's session.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from expense_tracker.config import get_settings
from expense_tracker.main import app
from expense_tracker.models import Base
from expense_tracker.models.account import Account
from expense_tracker.models.base import get_db
from expense_tracker.models.enums import Role
from expense_tracker.security import create_session_token, hash_password


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    The get_db dependency is overridden so the app uses the
    test session. The client is not entered as a context
    manager, so the startup bootstrap does not run.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_account(db_session):
    """Factory: insert an account directly and return it."""
    def factory(email, password="secret", role=Role.USER, name="Test"):
        account = Account(
            email=email,
            password_hash=hash_password(password),
            name=name,
            role=role,
        )
        db_session.add(account)
        db_session.commit()
        return account
    return factory


@pytest.fixture
def headers_for(settings):
    """Factory: bearer headers for an account."""
    def factory(account) -> dict:
        token = create_session_token(settings.SECRET_KEY, account.id, account.email)
        return {"Authorization": f"Bearer {token}"}
    return factory


@pytest.fixture
def admin(make_account):
    return make_account("admin@test.com", role=Role.ADMIN, name="Admin")


@pytest.fixture
def alice(make_account):
    return make_account("alice@test.com", name="Alice")


@pytest.fixture
def bob(make_account):
    return make_account("bob@test.com", name="Bob")


@pytest.fixture
def admin_headers(headers_for, admin):
    return headers_for(admin)


@pytest.fixture
def alice_headers(headers_for, alice):
    return headers_for(alice)


@pytest.fixture
def bob_headers(headers_for, bob):
    return headers_for(bob)
