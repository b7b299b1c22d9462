"""
Book Service

Validation and orchestration between callers and the book repository.

Responsibilities:
- Validate input before touching storage, reporting every bad field at once
- Assign identity on creation (ids never come from the caller)
- Translate between the external shape (schemas) and the storage shape (models)
- Check existence before update/delete and raise BookNotFoundError

No local recovery: every failure is raised where it is detected and
propagates unchanged (StorageError from the repository included).

Update is two round trips (read, then write) with no transaction around
them. If a delete lands in between, the write fails with StorageError
and the book stays deleted; that race is accepted.
"""

import logging
import uuid
from collections.abc import Callable

from bookshelf.exceptions import BookNotFoundError, InvalidArgumentError
from bookshelf.models import Book
from bookshelf.repositories import BookRepository
from bookshelf.schemas import BookCreate, BookResponse, BookUpdate

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("name", "author", "year")


def generate_book_id() -> str:
    """Return a fresh globally-unique book id."""
    return str(uuid.uuid4())


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _missing_fields(data: BookCreate, fields: tuple[str, ...]) -> list[str]:
    """Collect the names of all required fields that are missing or blank."""
    return [field for field in fields if _is_blank(getattr(data, field))]


class BookService:
    """
    Book CRUD operations with validation and not-found semantics.

    Args:
        repository: Storage gateway for book records
        id_factory: Callable returning a new unique id per create

    Example:
        service = BookService(SQLAlchemyBookRepository(db))
        book = service.create_book(
            BookCreate(name="Cool Book", author="John Smith", year="2018")
        )
        service.get_book(book.id)
    """

    def __init__(
        self,
        repository: BookRepository,
        id_factory: Callable[[], str] = generate_book_id,
    ) -> None:
        self.repository = repository
        self.id_factory = id_factory

    def create_book(self, data: BookCreate | None) -> BookResponse:
        """
        Validate and store a new book.

        Returns:
            The stored book, including its service-assigned id

        Raises:
            InvalidArgumentError: data is None or name/author/year is blank
            StorageError: the repository failed to insert
        """
        if data is None:
            raise InvalidArgumentError(["book"])

        missing = _missing_fields(data, BOOK_FIELDS)
        if missing:
            raise InvalidArgumentError(missing)

        book = Book(
            id=self.id_factory(),
            name=data.name,
            author=data.author,
            year=data.year,
        )
        stored = self.repository.create(book)
        logger.info(f"Created book {stored.id}")

        return BookResponse.model_validate(stored)

    def get_book(self, book_id: str | None) -> BookResponse:
        """
        Get a single book by id.

        Raises:
            InvalidArgumentError: book_id is blank
            BookNotFoundError: no book has this id
        """
        book = self._get_existing(book_id)
        return BookResponse.model_validate(book)

    def get_books(self) -> list[BookResponse]:
        """Return all books; an empty list when there are none."""
        books = self.repository.get_all() or []
        return [BookResponse.model_validate(book) for book in books]

    def update_book(self, data: BookUpdate | None) -> None:
        """
        Overwrite name, author and year of an existing book.

        The id is never changed.

        Raises:
            InvalidArgumentError: data is None or id/name/author/year is blank
            BookNotFoundError: no book has this id
        """
        if data is None:
            raise InvalidArgumentError(["book"])

        missing = _missing_fields(data, ("id",) + BOOK_FIELDS)
        if missing:
            raise InvalidArgumentError(missing)

        book = self._get_existing(data.id)
        book.name = data.name
        book.author = data.author
        book.year = data.year

        self.repository.update(book)
        logger.info(f"Updated book {book.id}")

    def delete_book(self, book_id: str | None) -> None:
        """
        Delete an existing book.

        Raises:
            InvalidArgumentError: book_id is blank
            BookNotFoundError: no book has this id
        """
        book = self._get_existing(book_id)
        self.repository.delete(book.id)
        logger.info(f"Deleted book {book.id}")

    def _get_existing(self, book_id: str | None) -> Book:
        if _is_blank(book_id):
            raise InvalidArgumentError(["id"])

        book = self.repository.get(book_id)
        if book is None:
            logger.warning(f"Book {book_id} not found")
            raise BookNotFoundError(book_id)

        return book
