"""
SQLAlchemy Models Package

Storage shapes for the record store. Import models here so that
Alembic discovers them through Base.metadata.
"""

from bookshelf.models.book import Book

__all__ = [
    "Book",
]
