"""
Security Service

Handles password hashing and bearer token operations.

Security Features:
==================
1. Password hashing with bcrypt over a SHA-256 pre-hash (passlib): salted,
   slow, one-way, and no 72-byte password limit
2. JWT issuing with subject, token id, user id, issuer, audience, expiry
3. JWT validation of signature, issuer, audience, and expiry

Tokens are self-contained: nothing is stored server-side, so a token stays
valid until it expires even if the user's password changes meanwhile.

Usage:
    from catalog_api.services.security import create_access_token, decode_access_token

    token = create_access_token(user)
    identity = decode_access_token(token)
    if identity is None:
        ...  # reject as unauthenticated
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from catalog_api.config import get_settings
from catalog_api.models.user import User

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# - schemes: bcrypt_sha256 pre-hashes with SHA-256 so bcrypt sees every byte
#   of the password (plain bcrypt ignores bytes past 72); the salt is
#   embedded in every hash. Plain bcrypt hashes still verify.
# - deprecated: "auto" means old hashes are automatically upgraded
pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("Secret1")
        >>> hashed.startswith("$bcrypt-sha256$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a stored bcrypt hash.

    The hash is recomputed with the stored salt and compared in constant
    time; the stored value is never decoded.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Issuing
# -------------------------------------------------------------------------
@dataclass(frozen=True)
class TokenIdentity:
    """Identity extracted from a validated bearer token."""

    user_name: str
    user_id: int
    token_id: str
    expires_at: datetime


def create_access_token(
    user: User,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token for a user.

    Claims:
        sub: user name
        jti: fresh random identifier
        id:  user id (as a string)
        iss/aud: configured issuer and audience
        exp: now + configured lifetime

    Args:
        user: The authenticated user
        expires_delta: Optional custom lifetime (mainly for tests)

    Returns:
        Encoded JWT token string (header.payload.signature)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    expire = datetime.now(UTC) + expires_delta

    to_encode = {
        "sub": user.user_name,
        "jti": str(uuid.uuid4()),
        "id": str(user.id),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


# -------------------------------------------------------------------------
# JWT Token Validation
# -------------------------------------------------------------------------
def decode_access_token(token: str, now: datetime | None = None) -> TokenIdentity | None:
    """
    Validate a JWT access token and extract the identity it carries.

    python-jose verifies the signature, issuer, and audience. Expiry is
    checked here against `now` so callers (and tests) can evaluate the same
    token at different instants.

    Args:
        token: The JWT token string
        now: Instant to validate at; defaults to the current UTC time

    Returns:
        TokenIdentity if valid, None on any failure
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={
                "verify_exp": False,
                "require_exp": True,
                "require_sub": True,
                "require_iss": True,
                "require_aud": True,
            },
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None

    if now is None:
        now = datetime.now(UTC)

    try:
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
        user_id = int(payload["id"])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"JWT claims malformed: {e}")
        return None

    if now >= expires_at:
        logger.warning(f"JWT expired at {expires_at.isoformat()}")
        return None

    return TokenIdentity(
        user_name=payload["sub"],
        user_id=user_id,
        token_id=payload.get("jti", ""),
        expires_at=expires_at,
    )
