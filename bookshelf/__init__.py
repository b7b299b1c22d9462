"""
Bookshelf Application Package

A small CRUD service for book records.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Domain errors (invalid argument, not found, storage)
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy storage shapes
- schemas/: Pydantic request/response shapes
- repositories/: Storage gateway over the record store
- services/: Validation and orchestration
- routers/: API route handlers
"""

__version__ = "0.1.0"
