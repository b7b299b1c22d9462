"""
pytest Fixtures for Bookshelf Tests

Shared fixtures used across all test files.

For database tests we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# so the module-level engine points at in-memory SQLite, not PostgreSQL.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DATABASE_NAME"] = ""
os.environ["BOOKS_COLLECTION"] = "books"

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookshelf.database import Base, get_db
from bookshelf.main import app
from bookshelf.models import Book
from bookshelf.repositories import BookRepository, SQLAlchemyBookRepository
from bookshelf.services import BookService

# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
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

    The session joins an outer transaction that is rolled back after the
    test, so commits made by the repository never leak between tests.
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
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session; the
    repository and service dependencies build on top of it.
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
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def repository(db_session: Session) -> SQLAlchemyBookRepository:
    """Storage gateway bound to the test session."""
    return SQLAlchemyBookRepository(db_session)


@pytest.fixture
def service(repository: SQLAlchemyBookRepository) -> BookService:
    """Book service over the real (SQLite) repository."""
    return BookService(repository)


@pytest.fixture
def mock_repository() -> MagicMock:
    """
    Repository mock for checking which storage calls the service makes.

    create() echoes the book back, like a successful insert.
    """
    repository = MagicMock(spec=BookRepository)
    repository.create.side_effect = lambda book: book
    repository.get.return_value = None
    repository.get_all.return_value = []
    return repository


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        id="6f1c9a1e-3b0e-4d5e-9a57-6d3f0b0f2a11",
        name="Cool Book",
        author="John Smith",
        year="2018",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several books for listing tests."""
    books = [
        Book(
            id=f"00000000-0000-4000-8000-00000000000{i}",
            name=f"Test Book {i}",
            author=f"Author {i}",
            year=str(2000 + i),
        )
        for i in range(1, 4)
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books
