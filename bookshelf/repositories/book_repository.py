"""
Book Repository

The storage gateway for book records.

BookRepository is the narrow contract the book service depends on.
SQLAlchemyBookRepository implements it on top of a SQLAlchemy session.

Rules of the contract:
- No validation and no business rules live here
- get() returns None for a missing book; absence is not an error
- get_all() returns an empty list, never None
- Any backend failure surfaces as StorageError
- No caching and no retries
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookshelf.exceptions import StorageError
from bookshelf.models import Book

logger = logging.getLogger(__name__)


class BookRepository(ABC):
    """Capability set consumed by the book service."""

    @abstractmethod
    def create(self, book: Book) -> Book:
        """Insert a new book and return it as stored."""

    @abstractmethod
    def get(self, book_id: str) -> Book | None:
        """Return the book with this id, or None if there is none."""

    @abstractmethod
    def get_all(self) -> list[Book]:
        """Return every stored book."""

    @abstractmethod
    def update(self, book: Book) -> None:
        """Replace the stored book matching book.id wholesale."""

    @abstractmethod
    def delete(self, book_id: str) -> None:
        """Remove the book with this id."""


class SQLAlchemyBookRepository(BookRepository):
    """
    BookRepository backed by a SQLAlchemy session.

    Each write commits immediately: one call is one round trip to the
    store. On failure the session is rolled back and the driver error is
    chained onto a StorageError.

    Usage:
        repository = SQLAlchemyBookRepository(db)
        book = repository.get("6f1c9a1e-...")
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error(f"Storage error while trying to {action}: {exc}")
        return StorageError(f"Failed to {action}")

    def create(self, book: Book) -> Book:
        book_id = book.id
        try:
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as exc:
            raise self._fail(f"create book {book_id}", exc) from exc
        return book

    def get(self, book_id: str) -> Book | None:
        stmt = select(Book).where(Book.id == book_id)
        try:
            return self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail(f"get book {book_id}", exc) from exc

    def get_all(self) -> list[Book]:
        stmt = select(Book)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            raise self._fail("list books", exc) from exc

    def update(self, book: Book) -> None:
        book_id = book.id
        # merge() attaches a detached book; an attached one is used as-is.
        # If the row was deleted after it was read, the UPDATE matches no
        # row and the commit raises StaleDataError (a SQLAlchemyError).
        try:
            self.db.merge(book)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"update book {book_id}", exc) from exc

    def delete(self, book_id: str) -> None:
        stmt = delete(Book).where(Book.id == book_id)
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"delete book {book_id}", exc) from exc
