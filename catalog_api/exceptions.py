"""
Domain Exceptions

Services raise these instead of HTTP errors so they stay usable outside a
request. Each exception knows the HTTP status it maps to; a single handler
registered in main.create_app() renders them as {"detail": ...}.

Taxonomy:
- InvalidInputError: malformed or missing parameters (400)
- UnauthenticatedError: bad credentials or missing/invalid token (401)
- NotFoundError: missing resource (404)
- ConflictError: duplicate unique field (409)
- InternalFailureError: unexpected failure, generic message (500)
"""

from fastapi import status


class CatalogAPIError(Exception):
    """Base exception for Book Catalog API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "An internal error occurred."

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None):
        self.detail = detail or self.default_detail
        self.headers = headers
        super().__init__(self.detail)


class InvalidInputError(CatalogAPIError):
    """Input validation failed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."


class UnauthenticatedError(CatalogAPIError):
    """Credentials or bearer token were rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(CatalogAPIError):
    """Resource not found."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found."


class ConflictError(CatalogAPIError):
    """A unique field is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."


class InternalFailureError(CatalogAPIError):
    """Unexpected failure. The detail never carries the underlying error."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
