"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

The chain for the books endpoints is:
    get_db -> get_book_repository -> get_book_service

Tests override get_db with a session bound to an in-memory database,
and everything above it follows automatically.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf.database import get_db
from bookshelf.repositories import BookRepository, SQLAlchemyBookRepository
from bookshelf.services import BookService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


def get_book_repository(db: DbSession) -> BookRepository:
    """Storage gateway bound to the current request's session."""
    return SQLAlchemyBookRepository(db)


def get_book_service(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    """Book service wired to the request's repository."""
    return BookService(repository)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]
