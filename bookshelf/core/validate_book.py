"""Book Validation: pure rule check for candidate book records.

Invariants:
    - Rules checked in fixed order: title, author, year (first failure wins)
    - Returns the failure message or None; never raises, never mutates
    - year > 0 is also a table CHECK constraint; both are enforced
"""

from bookshelf.core.domain_types import Book


TITLE_REQUIRED = "title is required"
AUTHOR_REQUIRED = "author is required"
YEAR_NOT_POSITIVE = "year must be > 0"


def validate_book(book: Book) -> str | None:
    """Return the first violated rule's message, or None when the book is valid."""
    if not book.title.strip():
        return TITLE_REQUIRED
    if not book.author.strip():
        return AUTHOR_REQUIRED
    if book.year <= 0:
        return YEAR_NOT_POSITIVE
    return None
