"""
Domain Exceptions

Raised by the book service and repository, translated into HTTP
responses by the exception handlers registered in main.py.

- InvalidArgumentError: caller data failed validation (400)
- BookNotFoundError: no stored book for the given id (404)
- StorageError: the record store failed (500)
"""

from collections.abc import Iterable


class BookshelfError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(BookshelfError):
    """
    Raised when caller-supplied data fails validation.

    Carries every offending field name, in the order they were checked,
    so a caller can fix all of them in one round trip.
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__(
            f"Missing or empty required field(s): {', '.join(self.fields)}"
        )


class BookNotFoundError(BookshelfError):
    """Raised when a requested book does not exist."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__(f"Book with id {book_id} not found")


class StorageError(BookshelfError):
    """Raised when the record store fails (connectivity, write failure, ...)."""
