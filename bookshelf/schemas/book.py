"""Book Schemas: Pydantic models for the /books API boundary.

Invariants:
    - BookPayload only checks JSON shape (types); semantic rules live in core.validate_book
    - Missing or null title/author decode to "" and missing year to 0, so the
      semantic rules report "title is required" etc. instead of a decode error
    - Any id sent by the client is accepted and ignored

Design Decisions:
    - Strict field types: "1965" or 1965.5 for year is a decode failure, not a coercion
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from bookshelf.core.domain_types import Book, MAX_BOOK_ID


class BookPayload(BaseModel):
    """Request body for POST /books and PUT /books/{id}."""
    id: StrictInt | None = None
    title: StrictStr = ""
    author: StrictStr = ""
    year: StrictInt = Field(0, le=MAX_BOOK_ID)

    @field_validator("title", "author", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        return "" if v is None else v

    def to_domain(self) -> Book:
        return Book(title=self.title, author=self.author, year=self.year)


class BookResponse(BaseModel):
    """Public book representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    year: int
