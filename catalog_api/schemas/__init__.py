"""
Pydantic Schemas Package

Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what is exposed (no password hashes)
2. Validation: Different rules for requests and responses
3. Wire format: camelCase on the wire, snake_case in Python

Schema Naming Convention:
- XxxCreate / XxxUpdate: Request bodies for writes
- XxxRequest: Other request bodies
- XxxResponse: Fields returned in API responses
"""

from catalog_api.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from catalog_api.schemas.pagination import PageResponse
from catalog_api.schemas.user import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserPublicResponse,
)

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Pagination
    "PageResponse",
    # Auth/User schemas
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "TokenResponse",
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "UserPublicResponse",
]
