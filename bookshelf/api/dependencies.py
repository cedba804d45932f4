"""Route Dependencies: path-parameter parsing shared by the /books routes.

Invariants:
    - A book id is an optionally signed run of ASCII digits that parses to 1..MAX_BOOK_ID
    - Anything else raises InvalidIdError ("invalid id")
    - Runs as a dependency, so the id is rejected before the request body is decoded
"""

import re

from bookshelf.core.domain_types import BookId, MAX_BOOK_ID
from bookshelf.core.errors import InvalidIdError

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_book_id(book_id: str) -> BookId:
    if not _ID_PATTERN.fullmatch(book_id):
        raise InvalidIdError(book_id)
    value = int(book_id)
    if value <= 0 or value > MAX_BOOK_ID:
        raise InvalidIdError(book_id)
    return BookId(value)
