"""
Test Suite for Bookshelf

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: Tests for /api/v1/books endpoints
- test_book_service.py: Book service validation and orchestration
- test_book_repository.py: Storage gateway against SQLite
- test_config.py: Settings validation and URL building

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=bookshelf --cov-report=html

    # Run specific file
    pytest tests/test_books.py
"""
