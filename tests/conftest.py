"""
pytest Fixtures for Book Catalog API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (each test runs inside a transaction that is
  rolled back afterwards)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# Settings are cached on first import, so these must come first.
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_api.database import Base, get_db
from catalog_api.main import app
from catalog_api.models import Book, User
from catalog_api.seed import seed_books
from catalog_api.services.security import create_access_token, hash_password

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the entire session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back, so commits
    made by the code under test never leak into other tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    # A rollback inside the code under test may already have ended it
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test database.

    The get_db dependency is overridden to hand out the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user with password 'Secret1'."""
    user = User(
        user_name="alice",
        password_hash=hash_password("Secret1"),
        name="Alice Liddell",
        email="alice@example.com",
        mobile="",
        address="",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(sample_user: User) -> dict[str, str]:
    """Authorization header carrying a fresh token for sample_user."""
    token = create_access_token(sample_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a single book."""
    book = Book(
        title="Clean Code",
        author="Robert C. Martin",
        published_date=date(2008, 8, 1),
        language="English",
        genre="Software",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def seeded_books(db_session: Session) -> list[Book]:
    """Insert the five starter books."""
    books = seed_books(db_session)
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create 15 books for pagination testing."""
    books = []
    for i in range(15):
        book = Book(
            title=f"Test Book {i + 1}",
            author=f"Author {i + 1}",
            published_date=date(2000 + i, 1, 1),
            language="English",
            genre="Testing",
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
