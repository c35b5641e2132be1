"""
Book Catalog API Package

Main application package for the Book Catalog API: a small catalog of
books behind a username/password login that issues bearer tokens.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Domain error taxonomy mapped to HTTP status codes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions (DB session, bearer auth)
- seed.py: Initial catalog and default user
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (auth, catalog, pagination, security)
"""

__version__ = "0.1.0"
