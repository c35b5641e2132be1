"""
Catalog Service

CRUD, search, and pagination over book records.

Lookups return None (or False for deletes) when the book does not exist;
the router decides that this means 404. Only search and pagination raise,
because their failures are input errors rather than missing resources.
"""

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from catalog_api.exceptions import InvalidInputError
from catalog_api.models.book import Book
from catalog_api.schemas.book import BookCreate, BookUpdate
from catalog_api.services.pagination import Page, paginate, validate_page_params

logger = logging.getLogger(__name__)


def list_books(db: Session) -> list[Book]:
    """Return every book in store order."""
    return list(db.execute(select(Book).order_by(Book.id)).scalars().all())


def get_book(db: Session, book_id: int) -> Book | None:
    """Return a book by id, or None."""
    return db.get(Book, book_id)


def create_book(db: Session, book_data: BookCreate) -> Book:
    """
    Create a new book. The store assigns the id.

    Args:
        db: Database session
        book_data: Validated book fields

    Returns:
        The created Book, refreshed with its id
    """
    book = Book(**book_data.model_dump())

    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.id}: {book.title}")

    return book


def update_book(db: Session, book_id: int, book_data: BookUpdate) -> Book | None:
    """
    Replace every field of an existing book.

    Returns:
        The updated Book, or None if it does not exist
    """
    book = get_book(db, book_id)
    if book is None:
        return None

    for field, value in book_data.model_dump().items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    logger.info(f"Updated book {book.id}")

    return book


def delete_book(db: Session, book_id: int) -> bool:
    """
    Delete a book permanently.

    Returns:
        True if a book was deleted, False if it did not exist
    """
    book = get_book(db, book_id)
    if book is None:
        return False

    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")

    return True


def search_books(db: Session, query: str | None) -> list[Book]:
    """
    Find books whose title or author contains the query.

    Matching is a case-insensitive substring test.

    Raises:
        InvalidInputError: If the query is blank

    Example:
        search_books(db, "CLEAN")  # matches "Clean Code"
    """
    if query is None or not query.strip():
        raise InvalidInputError("Query parameter 'q' is required.")

    search_term = query.lower()
    stmt = (
        select(Book)
        .where(
            or_(
                func.lower(Book.title).contains(search_term, autoescape=True),
                func.lower(Book.author).contains(search_term, autoescape=True),
            )
        )
        .order_by(Book.id)
    )
    return list(db.execute(stmt).scalars().all())


def list_books_paged(db: Session, page: int, page_size: int) -> Page[Book]:
    """
    Return one page of the full catalog, unfiltered.

    Raises:
        InvalidInputError: On non-positive arguments or a page past the end
    """
    validate_page_params(page, page_size)
    return paginate(list_books(db), page, page_size)
