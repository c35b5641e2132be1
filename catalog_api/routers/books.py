"""
Books Router

CRUD, search, and paged listing for the book catalog.

Every endpoint requires a valid bearer token (the CurrentUser dependency
runs before the handler body).

Route order matters: /search and /paged are declared before /{book_id}
so they are not captured by the path parameter.
"""

import logging

from fastapi import APIRouter, Request, Response, status

from catalog_api.dependencies import CurrentUser, DbSession, Pagination
from catalog_api.exceptions import CatalogAPIError, InternalFailureError, NotFoundError
from catalog_api.models import Book
from catalog_api.schemas.book import BookCreate, BookResponse, BookUpdate
from catalog_api.schemas.pagination import PageResponse
from catalog_api.services import catalog as catalog_service

logger = logging.getLogger(__name__)

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        401: {"description": "Missing or invalid bearer token"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(db: DbSession, book_id: int) -> Book:
    """
    Get a book by ID or raise 404.

    Raises:
        NotFoundError: 404 if book not found
    """
    book = catalog_service.get_book(db, book_id)

    if book is None:
        raise NotFoundError(f"Book with id {book_id} not found")

    return book


# =============================================================================
# Endpoints
# =============================================================================
@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book in the catalog.",
)
def list_books(
    db: DbSession,
    _: CurrentUser,
) -> list[BookResponse]:
    """List all books in store order."""
    books = catalog_service.list_books(db)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/search",
    response_model=list[BookResponse],
    summary="Search books",
    description="""
    Find books whose title or author contains `q` (case-insensitive).

    Examples:
        GET /api/books/search?q=clean
        GET /api/books/search?q=FOWLER
    """,
    responses={400: {"description": "Query parameter 'q' is missing or blank"}},
)
def search_books(
    db: DbSession,
    _: CurrentUser,
    q: str | None = None,
) -> list[BookResponse]:
    """Search books by title or author."""
    books = catalog_service.search_books(db, q)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/paged",
    response_model=PageResponse[BookResponse],
    summary="List books (paged)",
    description="""
    Get one page of the catalog with previous/next page numbers.

    **Query parameters:** `page` (default 1), `pageSize` (default 10).
    Both must be greater than zero and `page` must not exceed the number of
    pages (an empty catalog has one page).
    """,
    responses={
        400: {"description": "Invalid page parameters or page out of range"},
        500: {"description": "Unexpected failure"},
    },
)
def list_books_paged(
    db: DbSession,
    pagination: Pagination,
    _: CurrentUser,
) -> PageResponse[BookResponse]:
    """Return one page of books in store order."""
    try:
        page = catalog_service.list_books_paged(db, pagination.page, pagination.page_size)
    except CatalogAPIError:
        raise
    except Exception:
        logger.error("Failed to list books", exc_info=True)
        raise InternalFailureError(
            "An error occurred while retrieving paginated books."
        ) from None

    return PageResponse[BookResponse].from_page(
        page,
        [BookResponse.model_validate(book) for book in page.data],
    )


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses={404: {"description": "Book not found"}},
)
def get_book(
    book_id: int,
    db: DbSession,
    _: CurrentUser,
) -> BookResponse:
    """Get a single book by its ID."""
    book = get_book_or_404(db, book_id)
    return BookResponse.model_validate(book)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book. The server assigns the id.",
)
def create_book(
    request: Request,
    response: Response,
    book_data: BookCreate,
    db: DbSession,
    _: CurrentUser,
) -> BookResponse:
    """
    Create a new book.

    Returns 201 Created with a Location header pointing at the new book.
    """
    book = catalog_service.create_book(db, book_data)

    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))

    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    description="Replace every field of an existing book.",
    responses={404: {"description": "Book not found"}},
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
    _: CurrentUser,
) -> None:
    """
    Update an existing book.

    Returns 204 No Content on success.
    """
    book = catalog_service.update_book(db, book_id, book_data)

    if book is None:
        raise NotFoundError(f"Book with id {book_id} not found")


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book from the catalog.",
    responses={404: {"description": "Book not found"}},
)
def delete_book(
    book_id: int,
    db: DbSession,
    _: CurrentUser,
) -> None:
    """
    Delete a book.

    Returns 204 No Content on success (standard for DELETE).
    """
    if not catalog_service.delete_book(db, book_id):
        raise NotFoundError(f"Book with id {book_id} not found")
