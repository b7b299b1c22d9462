"""
Pydantic Schemas Package

Request/response shapes, kept separate from the SQLAlchemy storage shapes.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxUpdate: Fields accepted when updating (includes the id)
- XxxResponse: Fields returned in API responses
"""

from bookshelf.schemas.book import (
    BookCreate,
    BookResponse,
    BookUpdate,
)

__all__ = [
    "BookCreate",
    "BookUpdate",
    "BookResponse",
]
