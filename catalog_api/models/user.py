"""
User Model

Credential store for the authentication layer: one row per registered
customer holding their login name, password hash, and display attributes.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class User(Base):
    """
    User model representing registered customers.

    Table: users

    Indexes:
    - Primary key on id (automatic)
    - user_name: Unique index. Registration also pre-checks the name, but
      only this constraint stops two concurrent registrations from both
      succeeding.
    - email: Index for forgot-password lookups (not unique)

    Users are never deleted; password_hash changes on password reset.

    Example:
        user = User(
            user_name="alice",
            password_hash=hash_password("Secret1"),
            name="Alice",
            email="alice@example.com",
            mobile="",
            address="",
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Authentication Fields
    # -------------------------------------------------------------------------
    user_name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
        comment="Login name, unique across all users"
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hash of the password"
    )

    # -------------------------------------------------------------------------
    # Profile Fields
    # -------------------------------------------------------------------------
    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name"
    )

    email: Mapped[str | None] = mapped_column(
        String(255),
        index=True,
        nullable=True,
        comment="Email address used for password resets"
    )

    mobile: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Mobile phone number"
    )

    address: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Postal address"
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, user_name='{self.user_name}')"
