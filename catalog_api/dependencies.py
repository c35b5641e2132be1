"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Dependencies defined here:
- DbSession: per-request SQLAlchemy session
- PageParams: page/pageSize query parameters for paged listings
- CurrentUser: identity from a validated bearer token (gates protected routes)
"""

from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from catalog_api.config import get_settings
from catalog_api.database import get_db
from catalog_api.exceptions import UnauthenticatedError
from catalog_api.services.security import TokenIdentity, decode_access_token

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Pagination parameters for paged list endpoints.

        GET /api/books/paged?page=2&pageSize=20

    No range constraints are declared on the Query() objects: out-of-range
    values reach the pagination service, which rejects them with a 400
    instead of FastAPI's 422.
    """

    def __init__(
        self,
        page: int = Query(
            default=1,
            description="Page number (1-indexed)",
            examples=[1, 2, 3],
        ),
        page_size: int = Query(
            default=settings.default_page_size,
            alias="pageSize",
            description="Number of items per page",
            examples=[10, 25, 50],
        ),
    ) -> None:
        self.page = page
        self.page_size = page_size


Pagination = Annotated[PaginationParams, Depends()]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>" and adds
# the "Authorize" button to Swagger UI. auto_error is off so that a missing
# header produces the same 401 as an invalid token.

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenIdentity:
    """
    Validate the bearer token and return the identity it carries.

    The token is self-contained, so no database lookup happens here.

    Raises:
        UnauthenticatedError: 401 if the header is missing or the token is
            invalid, expired, or for another issuer/audience
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthenticatedError("Not authenticated")

    identity = decode_access_token(credentials.credentials)
    if identity is None:
        raise UnauthenticatedError("Could not validate credentials")

    return identity


CurrentUser = Annotated[TokenIdentity, Depends(get_current_user)]
