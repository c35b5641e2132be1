"""
SQLAlchemy Models Package

Models are SQLAlchemy ORM classes that map to database tables:
- User: registered customers (credential store)
- Book: catalog records

The two tables are independent; there is no foreign key between them.

Import all models here so that:
1. They are available as: from catalog_api.models import Book, User
2. Alembic and create_tables() discover them through Base.metadata
"""

from catalog_api.models.book import Book
from catalog_api.models.user import User

__all__ = [
    "Book",
    "User",
]
