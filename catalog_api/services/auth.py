"""
Authentication Service

Registration, login, password reset, and the paginated user listing.

Errors are raised as domain exceptions (catalog_api.exceptions) and turned
into HTTP responses by the handler in main.py.

Security Features:
=================
1. Passwords are stored as bcrypt hashes, never in a recoverable form
2. Usernames are unique at the database level, not just by pre-check
3. Temporary passwords come from the `secrets` CSPRNG
4. Listed users get a masked email and no password hash
"""

import logging
import secrets
import string
from dataclasses import replace

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog_api.config import get_settings
from catalog_api.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from catalog_api.models.user import User
from catalog_api.schemas.user import UserPublicResponse
from catalog_api.services.pagination import Page, paginate, validate_page_params
from catalog_api.services.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)
settings = get_settings()

TEMP_PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
TEMP_PASSWORD_LENGTH = 8


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def get_user_by_name(db: Session, user_name: str) -> User | None:
    """Look up a user by exact user name."""
    stmt = select(User).where(User.user_name == user_name)
    return db.execute(stmt).scalar_one_or_none()


def register(
    db: Session,
    user_name: str | None,
    password: str | None,
    name: str | None = None,
    email: str | None = None,
) -> User:
    """
    Register a new user.

    Args:
        db: Database session
        user_name: Unique login name
        password: Plain password (hashed before storage)
        name: Optional display name
        email: Optional email for password resets

    Returns:
        The created User

    Raises:
        InvalidInputError: If user_name or password is blank
        ConflictError: If user_name is already taken
    """
    if _is_blank(user_name) or _is_blank(password):
        raise InvalidInputError("Username and password are required.")

    if get_user_by_name(db, user_name) is not None:
        raise ConflictError("Username already exists.")

    user = User(
        user_name=user_name,
        password_hash=hash_password(password),
        name=name,
        email=email,
        mobile="",
        address="",
    )

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.rollback()
        raise ConflictError("Username already exists.") from None
    db.refresh(user)

    logger.info(f"New user registered: {user.user_name}")

    return user


def authenticate(db: Session, user_name: str | None, password: str | None) -> User:
    """
    Check a user name and password.

    Raises:
        InvalidInputError: If either value is blank
        UnauthenticatedError: If the user is unknown or the password is wrong
    """
    if _is_blank(user_name) or _is_blank(password):
        raise InvalidInputError("Username and password are required.")

    user = get_user_by_name(db, user_name)
    if user is None:
        logger.warning(f"Login failed: user not found for {user_name}")
        raise UnauthenticatedError("Incorrect username or password")

    if not verify_password(password, user.password_hash):
        logger.warning(f"Login failed: incorrect password for {user_name}")
        raise UnauthenticatedError("Incorrect username or password")

    return user


def login(db: Session, user_name: str | None, password: str | None) -> str:
    """
    Authenticate a user and issue a bearer token.

    Returns:
        Signed JWT for the user

    Raises:
        InvalidInputError: If either value is blank
        UnauthenticatedError: On bad credentials
    """
    user = authenticate(db, user_name, password)
    token = create_access_token(user)

    logger.info(f"User logged in: {user.user_name}")

    return token


def generate_temporary_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    """
    Generate a random alphanumeric password.

    Each character is drawn uniformly from the 62-symbol, case-sensitive
    alphanumeric alphabet.
    """
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))


def deliver_temporary_password(user: User, temporary_password: str) -> None:
    """
    Hand a temporary password to the user out of band.

    No mail transport is configured yet, so this only records that a
    delivery was due. The password itself is never logged.
    """
    logger.warning(
        f"No delivery channel configured; temporary password for "
        f"{user.user_name} was not sent"
    )


def forgot_password(db: Session, email: str | None) -> str:
    """
    Reset a user's password to a fresh temporary password.

    Args:
        db: Database session
        email: Email address of the account (exact match)

    Returns:
        The plain temporary password

    Raises:
        InvalidInputError: If email is blank
        NotFoundError: If no user has that email
    """
    if _is_blank(email):
        raise InvalidInputError("Email is required.")

    stmt = select(User).where(User.email == email).order_by(User.id)
    user = db.execute(stmt).scalars().first()
    if user is None:
        raise NotFoundError("User with the provided email not found.")

    temporary_password = generate_temporary_password()
    user.password_hash = hash_password(temporary_password)
    db.commit()

    logger.info(f"Password reset for user: {user.user_name}")

    if not settings.reveal_temporary_password:
        deliver_temporary_password(user, temporary_password)

    return temporary_password


def mask_email(email: str | None) -> str | None:
    """
    Obscure the local part of an email for display.

    Rules:
    - blank, no '@', or '@' first: returned unchanged
    - local part of 1-2 chars: first char + '*' + domain
    - longer local part: first char + '*' per hidden char + last char + domain

    This is a display transform, not a security control.

    Example:
        >>> mask_email("abcdef@x.com")
        'a****f@x.com'
        >>> mask_email("ab@x.com")
        'a*@x.com'
    """
    if email is None or not email.strip():
        return email

    at_index = email.find("@")
    if at_index <= 0:
        return email

    local_part = email[:at_index]
    domain_part = email[at_index:]

    if len(local_part) <= 2:
        return f"{local_part[0]}*{domain_part}"

    hidden = "*" * (len(local_part) - 2)
    return f"{local_part[0]}{hidden}{local_part[-1]}{domain_part}"


def to_public_view(user: User) -> UserPublicResponse:
    """Map a User to its listing view."""
    return UserPublicResponse(
        id=user.id,
        name=user.name,
        email=mask_email(user.email),
        mobile=user.mobile,
        address=user.address,
        user_name=user.user_name,
    )


def list_users_paged(db: Session, page: int, page_size: int) -> Page[UserPublicResponse]:
    """
    Return one page of users in store order.

    Raises:
        InvalidInputError: On non-positive arguments or a page past the end
    """
    validate_page_params(page, page_size)

    users = db.execute(select(User).order_by(User.id)).scalars().all()
    window = paginate(users, page, page_size)

    return replace(window, data=[to_public_view(user) for user in window.data])
