"""
Book Model

The catalog record. Books are flat rows: author, language, and genre are
plain strings rather than related tables, and there is no soft delete or
versioning.
"""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Indexes:
    - Primary key on id (automatic)
    - title, author: Indexed for search

    Example:
        book = Book(
            title="Clean Code",
            author="Robert C. Martin",
            published_date=date(2008, 8, 1),
            language="English",
            genre="Software",
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    # Date (not DateTime) because we only care about the day, not time
    published_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of publication"
    )

    language: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Language the book is written in"
    )

    genre: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Genre label"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
