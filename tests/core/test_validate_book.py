"""Book Validation: tests for the pure rule check.

Tests cover:
    - Valid books pass
    - Each rule's exact message
    - Precedence: title before author before year
    - Whitespace-only strings count as blank
"""

import pytest

from bookshelf.core.domain_types import Book
from bookshelf.core.validate_book import (
    validate_book, TITLE_REQUIRED, AUTHOR_REQUIRED, YEAR_NOT_POSITIVE,
)


def test_valid_book_passes():
    assert validate_book(Book(title="Dune", author="Frank Herbert", year=1965)) is None


def test_year_one_is_valid():
    assert validate_book(Book(title="T", author="A", year=1)) is None


@pytest.mark.parametrize("title", ["", " ", "\t\n "])
def test_blank_title_is_rejected(title):
    assert validate_book(Book(title=title, author="A", year=2000)) == "title is required"


@pytest.mark.parametrize("author", ["", "   "])
def test_blank_author_is_rejected(author):
    assert validate_book(Book(title="T", author=author, year=2000)) == "author is required"


@pytest.mark.parametrize("year", [0, -1, -5])
def test_non_positive_year_is_rejected(year):
    assert validate_book(Book(title="T", author="A", year=year)) == "year must be > 0"


def test_title_checked_before_author_and_year():
    assert validate_book(Book(title="", author="", year=0)) == TITLE_REQUIRED


def test_author_checked_before_year():
    assert validate_book(Book(title="T", author=" ", year=-3)) == AUTHOR_REQUIRED


def test_padded_values_are_accepted_as_is():
    book = Book(title="  Dune  ", author=" Herbert ", year=1965)
    assert validate_book(book) is None
    assert book.title == "  Dune  "


def test_messages_are_the_public_strings():
    assert YEAR_NOT_POSITIVE == "year must be > 0"
