"""
Services Package

Business logic that sits between the HTTP routers and storage:
- Separate from HTTP handling (routers)
- Independent of the storage backend (repositories)
- Easy to test in isolation with a mocked repository

Current services:
- book_service.py: Book validation, identity assignment and CRUD orchestration
"""

from bookshelf.services.book_service import BookService, generate_book_id

__all__ = [
    "BookService",
    "generate_book_id",
]
