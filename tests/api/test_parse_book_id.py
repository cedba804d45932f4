"""Book id parsing: positive signed-64-bit integers only."""

import pytest

from bookshelf.api.dependencies import parse_book_id
from bookshelf.core.domain_types import MAX_BOOK_ID
from bookshelf.core.errors import InvalidIdError


@pytest.mark.parametrize("raw, expected", [
    ("1", 1), ("42", 42), ("+7", 7), ("007", 7), (str(MAX_BOOK_ID), MAX_BOOK_ID),
])
def test_accepts_positive_integers(raw, expected):
    assert parse_book_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "0", "-1", "", " 1", "1 ", "1_000", "1.0", "0x10", "١٢",
    str(MAX_BOOK_ID + 1),
])
def test_rejects_everything_else(raw):
    with pytest.raises(InvalidIdError):
        parse_book_id(raw)
