"""Book ORM: the single persisted table.

Invariants:
    - id is an auto-incrementing integer primary key, never reused (sqlite_autoincrement)
    - title and author are non-nullable text
    - year > 0 enforced by a CHECK constraint as well as by core.validate_book
"""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.core.domain_types import Book
from bookshelf.db.base import Base


class BookModel(Base):
    """Row in the books table."""
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("year > 0", name="ck_books_year_positive"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_domain(self) -> Book:
        return Book(id=self.id, title=self.title, author=self.author, year=self.year)
