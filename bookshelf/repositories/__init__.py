"""
Repositories Package

Storage gateways that hide the record store from the services.
"""

from bookshelf.repositories.book_repository import (
    BookRepository,
    SQLAlchemyBookRepository,
)

__all__ = [
    "BookRepository",
    "SQLAlchemyBookRepository",
]
