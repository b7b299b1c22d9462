#!/usr/bin/env python3
"""
Database Seed Script

Populates the books collection with sample data for development.

USAGE:
    # From the project root
    python scripts/seed_data.py

Books go through BookService, so they get service-assigned ids and the
same validation as API requests.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookshelf.config import get_settings
from bookshelf.database import SessionLocal, create_tables
from bookshelf.models import Book
from bookshelf.repositories import SQLAlchemyBookRepository
from bookshelf.schemas import BookCreate, BookResponse
from bookshelf.services import BookService

SAMPLE_BOOKS = [
    {"name": "Nineteen Eighty-Four", "author": "George Orwell", "year": "1949"},
    {"name": "Animal Farm", "author": "George Orwell", "year": "1945"},
    {"name": "Pride and Prejudice", "author": "Jane Austen", "year": "1813"},
    {"name": "The Old Man and the Sea", "author": "Ernest Hemingway", "year": "1952"},
    {"name": "Murder on the Orient Express", "author": "Agatha Christie", "year": "1934"},
    {"name": "Foundation", "author": "Isaac Asimov", "year": "1951"},
    {"name": "The Hobbit", "author": "J.R.R. Tolkien", "year": "1937"},
]


def clear_data(db: Session) -> None:
    """Clear all existing books."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(service: BookService) -> list[BookResponse]:
    """Create sample books."""
    print("Creating books...")
    books = [service.create_book(BookCreate(**data)) for data in SAMPLE_BOOKS]
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print(f"Seeding collection '{settings.books_collection}'...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(BookService(SQLAlchemyBookRepository(db)))

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
