"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Routes depend on BookRepository, not on the SQLAlchemy-backed BookStore

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass an in-memory fake
      without inheriting from the real store
"""

from typing import Protocol

from bookshelf.core.domain_types import Book, BookId


class BookRepository(Protocol):
    """Contract for book persistence, implemented by services.book_store.BookStore.

    Errors: NotFoundError for a missing id, InvalidInputError for a book that
    fails validation, InternalError (DatabaseError, StoreTimeoutError) otherwise.
    """
    async def list_books(self) -> list[Book]: ...
    async def get_book(self, book_id: BookId) -> Book: ...
    async def create_book(self, book: Book) -> Book: ...
    async def update_book(self, book_id: BookId, book: Book) -> Book: ...
    async def delete_book(self, book_id: BookId) -> None: ...
