"""
Authentication Router

Handles user authentication endpoints:
- Registration (username/password)
- Login (username/password → JWT bearer token)
- Forgot password (email → temporary password)
- Paged user listing (bearer token required)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Bearer tokens are self-contained JWTs; nothing is stored server-side
"""

import logging

from fastapi import APIRouter, status

from catalog_api.config import get_settings
from catalog_api.dependencies import CurrentUser, DbSession, Pagination
from catalog_api.exceptions import CatalogAPIError, InternalFailureError
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
from catalog_api.services import auth as auth_service

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"description": "Bad request"},
    },
)


# -------------------------------------------------------------------------
# Registration Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
    description="""
    Create a new user account with a username and password.

    - `userName` and `password` must not be blank
    - `userName` must not already be registered (409 otherwise)
    - `name` and `email` are optional; `email` is used for password resets
    """,
    responses={409: {"description": "Username already exists"}},
)
def register(
    user_data: RegisterRequest,
    db: DbSession,
) -> RegisterResponse:
    """Register a new user with username and password."""
    user = auth_service.register(
        db,
        user_name=user_data.user_name,
        password=user_data.password,
        name=user_data.name,
        email=user_data.email,
    )

    return RegisterResponse(
        message="Registration successful.",
        id=user.id,
        user_name=user.user_name,
    )


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    description="""
    Authenticate with username and password to receive a JWT bearer token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
    responses={401: {"description": "Incorrect username or password"}},
)
def login(
    credentials: LoginRequest,
    db: DbSession,
) -> TokenResponse:
    """Authenticate user and return a signed bearer token."""
    token = auth_service.login(db, credentials.user_name, credentials.password)

    return TokenResponse(
        token=token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,  # Minutes to seconds
    )


# -------------------------------------------------------------------------
# Forgot Password Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/forgot-password",
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
    summary="Reset a forgotten password",
    description="""
    Replace the password of the account with this email by an 8-character
    temporary password.

    **Note:** When `REVEAL_TEMPORARY_PASSWORD` is enabled (the default) the
    temporary password is returned in the response body. Disable it once an
    email delivery channel is configured.
    """,
    responses={404: {"description": "No user with this email"}},
)
def forgot_password(
    request_data: ForgotPasswordRequest,
    db: DbSession,
) -> ForgotPasswordResponse:
    """Reset the password and return (or deliver) the temporary password."""
    temporary_password = auth_service.forgot_password(db, request_data.email)

    if settings.reveal_temporary_password:
        return ForgotPasswordResponse(
            message="Password reset successful. Use the temporary password to log in.",
            temporary_password=temporary_password,
        )

    return ForgotPasswordResponse(
        message="Password reset successful. Check your email for the temporary password.",
    )


# -------------------------------------------------------------------------
# User Listing Endpoint
# -------------------------------------------------------------------------
@router.get(
    "/users",
    response_model=PageResponse[UserPublicResponse],
    summary="List users (paged)",
    description="""
    Get one page of registered users. Emails are masked and password hashes
    are never returned.

    **Query parameters:** `page` (default 1), `pageSize` (default 10).
    Both must be greater than zero and `page` must not exceed the number of
    pages (an empty listing has one page).
    """,
    responses={
        401: {"description": "Missing or invalid bearer token"},
        500: {"description": "Unexpected failure"},
    },
)
def list_users(
    db: DbSession,
    pagination: Pagination,
    _: CurrentUser,
) -> PageResponse[UserPublicResponse]:
    """Return one page of users in store order."""
    try:
        page = auth_service.list_users_paged(db, pagination.page, pagination.page_size)
    except CatalogAPIError:
        raise
    except Exception:
        logger.error("Failed to list users", exc_info=True)
        raise InternalFailureError(
            "An error occurred while retrieving paginated users."
        ) from None

    return PageResponse[UserPublicResponse].from_page(page, page.data)
