"""
Book Pydantic Schemas

- BookBase: Fields shared by create, update, and response
- BookCreate: Body of POST /books
- BookUpdate: Body of PUT /books/{id} (full replacement)
- BookResponse: What the API returns, including the id
"""

from datetime import date

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog_api.schemas.user import CamelModel


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    Text fields are stripped and must not be blank.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Clean Code"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Robert C. Martin"],
    )

    published_date: date = Field(
        ...,
        description="Date of publication",
        examples=["2008-08-01"],
    )

    language: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Language the book is written in",
        examples=["English"],
    )

    genre: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Genre label",
        examples=["Software"],
    )

    @field_validator("title", "author", "language", "genre")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Validate and normalize text fields."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book. The server assigns the id.

    Example request body:
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "publishedDate": "2008-08-01",
        "language": "English",
        "genre": "Software"
    }
    """


class BookUpdate(BookBase):
    """
    Schema for updating an existing book.

    PUT semantics: every field is replaced, so every field is required.
    """


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 2,
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "publishedDate": "2008-08-01",
                "language": "English",
                "genre": "Software",
            }
        },
    )
