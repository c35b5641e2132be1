"""
User / Auth Pydantic Schemas

Request and response shapes for the /auth endpoints.

Field names are camelCase on the wire (userName, temporaryPassword) and
snake_case in Python; populate_by_name lets clients send either form.

Schemas:
- RegisterRequest: Registration data (userName, password, name, email)
- LoginRequest: Credentials for /auth/login
- TokenResponse: Signed bearer token
- ForgotPasswordRequest / ForgotPasswordResponse: Password reset
- UserPublicResponse: Listing view (masked email, never the password hash)

Blank credentials are rejected by the auth service with a 400 rather than
by Pydantic with a 422, so the credential fields are optional here.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RegisterRequest(CamelModel):
    """Schema for user registration."""

    user_name: str | None = Field(
        default=None,
        max_length=100,
        description="Unique login name",
        examples=["alice"],
    )

    password: str | None = Field(
        default=None,
        max_length=128,
        description="Password (no strength policy is enforced)",
        examples=["Secret1"],
    )

    name: str | None = Field(
        default=None,
        max_length=255,
        description="Display name",
        examples=["Alice Liddell"],
    )

    email: str | None = Field(
        default=None,
        max_length=255,
        description="Email address used for password resets",
        examples=["alice@example.com"],
    )


class RegisterResponse(CamelModel):
    """Schema for a successful registration."""

    message: str = Field(..., description="Human-readable outcome")
    id: int = Field(..., description="Id assigned to the new user")
    user_name: str = Field(..., description="Registered login name")


class LoginRequest(CamelModel):
    """Schema for login with username and password."""

    user_name: str | None = Field(
        default=None,
        description="Login name",
        examples=["alice"],
    )

    password: str | None = Field(
        default=None,
        description="Password",
        examples=["Secret1"],
    )


class TokenResponse(CamelModel):
    """
    Schema for a successful login.

    Send the token back as:
        Authorization: Bearer <token>
    """

    token: str = Field(..., description="Signed JWT bearer token")
    token_type: str = Field(default="bearer", description="Always 'bearer'")
    expires_in: int = Field(..., description="Token lifetime in seconds")


class ForgotPasswordRequest(CamelModel):
    """Schema for a password reset request."""

    email: str | None = Field(
        default=None,
        description="Email address of the account to reset",
        examples=["alice@example.com"],
    )


class ForgotPasswordResponse(CamelModel):
    """
    Schema for a password reset result.

    temporary_password is only present when the server is configured to
    reveal it (reveal_temporary_password).
    """

    message: str = Field(..., description="Human-readable outcome")
    temporary_password: str | None = Field(
        default=None,
        description="The new temporary password, when revealed",
    )


class UserPublicResponse(CamelModel):
    """
    Schema for the user listing.

    SECURITY: The email is masked for display and the password hash is
    never included.
    """

    id: int = Field(..., description="Unique user identifier")
    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Masked email address")
    mobile: str | None = Field(default=None, description="Mobile phone number")
    address: str | None = Field(default=None, description="Postal address")
    user_name: str = Field(..., description="Login name")
