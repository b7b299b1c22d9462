"""
Book Model

The storage shape of a book record.

The table name comes from the BOOKS_COLLECTION setting, so the same model
can point at a different collection per deployment without code changes.

NOTE: __tablename__ is read once, when this module is imported. Set
BOOKS_COLLECTION in the environment (or .env) before importing anything
from bookshelf; changing it afterwards has no effect (tests/conftest.py
sets it first for this reason).

Identity is an opaque string assigned by the book service (a UUID4 by
default), never by the database and never by the caller.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.config import get_settings
from bookshelf.database import Base

settings = get_settings()


class Book(Base):
    """
    Book entity as persisted in the record store.

    Table: settings.books_collection (default "books")

    Fields:
    - id: Opaque unique identifier (primary key)
    - name: Book title
    - author: Author name
    - year: Publication year, stored as text (not parsed)

    Example:
        book = Book(
            id="6f1c9a1e-3b0e-4d5e-9a57-6d3f0b0f2a11",
            name="Cool Book",
            author="John Smith",
            year="2018",
        )
    """

    __tablename__ = settings.books_collection

    id: Mapped[str] = mapped_column(
        String,
        primary_key=True,
        comment="Service-assigned unique identifier"
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Author name"
    )

    # Text on purpose: the year is never parsed as a number or date
    year: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Publication year as free text"
    )

    def __repr__(self) -> str:
        return f"Book(id='{self.id}', name='{self.name}', author='{self.author}')"
