"""
Starter Data

Fills an empty database with the starter catalog and a default account so
a fresh install can be explored right away:

- Five classic software books
- User `testuser` with password `Password123!`

Each part is only inserted when its table is empty, so running this again
is harmless.
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalog_api.models import Book, User
from catalog_api.services.security import hash_password

logger = logging.getLogger(__name__)

SEED_BOOKS = [
    {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt",
        "published_date": date(1999, 10, 20),
        "language": "English",
        "genre": "Software",
    },
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "published_date": date(2008, 8, 1),
        "language": "English",
        "genre": "Software",
    },
    {
        "title": "Domain-Driven Design",
        "author": "Eric Evans",
        "published_date": date(2003, 8, 30),
        "language": "English",
        "genre": "Software",
    },
    {
        "title": "Design Patterns",
        "author": "Erich Gamma",
        "published_date": date(1994, 10, 31),
        "language": "English",
        "genre": "Software",
    },
    {
        "title": "Refactoring",
        "author": "Martin Fowler",
        "published_date": date(1999, 7, 8),
        "language": "English",
        "genre": "Software",
    },
]

DEFAULT_USER = {
    "name": "Test User",
    "email": "test@example.com",
    "mobile": "1234567890",
    "address": "Test Address",
    "user_name": "testuser",
}
DEFAULT_USER_PASSWORD = "Password123!"


def _count(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar() or 0


def seed_books(db: Session) -> list[Book]:
    """Insert the starter catalog if there are no books yet."""
    if _count(db, Book) > 0:
        logger.debug("Books already present, skipping book seed")
        return []

    books = [Book(**data) for data in SEED_BOOKS]
    db.add_all(books)
    db.commit()

    logger.info(f"Seeded {len(books)} books")
    return books


def seed_default_user(db: Session) -> User | None:
    """Insert the default account if there are no users yet."""
    if _count(db, User) > 0:
        logger.debug("Users already present, skipping user seed")
        return None

    user = User(**DEFAULT_USER, password_hash=hash_password(DEFAULT_USER_PASSWORD))
    db.add(user)
    db.commit()

    logger.info(f"Seeded default user: {user.user_name}")
    return user


def seed_database(db: Session) -> None:
    """Seed books and the default user. Safe to call on every startup."""
    seed_books(db)
    seed_default_user(db)
