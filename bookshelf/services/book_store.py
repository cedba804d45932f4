"""Book Store: CRUD over the books table with bounded execution time.

Invariants:
    - Validation runs before any database work; its failure propagates as InvalidInputError
    - Every database round-trip runs inside asyncio.wait_for(timeout_seconds)
    - Timeout raises StoreTimeoutError; cancellation of the awaiting task
      cancels the in-flight query (no shielding)
    - Identifiers come from the backend's auto-increment, never from this module
    - Missing rows raise NotFoundError; driver errors arrive as DatabaseError

Design Decisions:
    - UPDATE/DELETE by primary key and check rowcount: one round-trip, no read-modify-write
    - No locking or retries: the database serializes concurrent writes to a row
"""

import asyncio
import logging
from dataclasses import replace
from typing import Awaitable, TypeVar

from fastapi import Request
from sqlalchemy import delete, select, update

from bookshelf.core.domain_types import Book, BookId
from bookshelf.core.errors import (
    ErrorContext, InvalidInputError, NotFoundError, StoreTimeoutError,
)
from bookshelf.core.validate_book import validate_book
from bookshelf.infrastructure.database import DatabaseSessionManager
from bookshelf.models.book import BookModel

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 3.0
RESOURCE_NAME = "book"

T = TypeVar("T")


class BookStore:
    """SQLAlchemy-backed implementation of core.repository_protocols.BookRepository."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._db = db
        self._timeout = timeout_seconds

    async def list_books(self) -> list[Book]:
        """All books ordered by id ascending. Empty table gives []."""
        return await self._bounded("list", self._select_all())

    async def get_book(self, book_id: BookId) -> Book:
        return await self._bounded("get", self._select_one(book_id))

    async def create_book(self, book: Book) -> Book:
        """Validate, insert, and return the book with its assigned id."""
        _raise_if_invalid(book)
        return await self._bounded("create", self._insert(book))

    async def update_book(self, book_id: BookId, book: Book) -> Book:
        """Replace title/author/year of an existing row. The id is taken from book_id."""
        book = replace(book, id=book_id)
        _raise_if_invalid(book)
        return await self._bounded("update", self._update(book))

    async def delete_book(self, book_id: BookId) -> None:
        await self._bounded("delete", self._delete(book_id))

    # ─── Bounded execution ──────────────────────────────────────

    async def _bounded(self, operation: str, work: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(work, timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.error(
                f"Book store {operation} timed out after {self._timeout}s",
                extra={"operation": operation, "error_code": "STORE_TIMEOUT"},
            )
            raise StoreTimeoutError(operation, self._timeout)

    # ─── Queries ────────────────────────────────────────────────

    async def _select_all(self) -> list[Book]:
        async with self._db.session() as session:
            result = await session.execute(
                select(BookModel).order_by(BookModel.id.asc()),
            )
            return [row.to_domain() for row in result.scalars().all()]

    async def _select_one(self, book_id: BookId) -> Book:
        async with self._db.session() as session:
            row = await session.get(BookModel, book_id)
            if row is None:
                raise NotFoundError(RESOURCE_NAME, book_id)
            return row.to_domain()

    async def _insert(self, book: Book) -> Book:
        async with self._db.session() as session:
            row = BookModel(title=book.title, author=book.author, year=book.year)
            session.add(row)
            await session.commit()
            logger.info(f"Book {row.id} created", extra={"book_id": row.id})
            return row.to_domain()

    async def _update(self, book: Book) -> Book:
        async with self._db.session() as session:
            result = await session.execute(
                update(BookModel)
                .where(BookModel.id == book.id)
                .values(title=book.title, author=book.author, year=book.year),
            )
            await session.commit()
            if result.rowcount == 0:
                raise NotFoundError(RESOURCE_NAME, book.id)
            logger.info(f"Book {book.id} updated", extra={"book_id": book.id})
            return book

    async def _delete(self, book_id: BookId) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                delete(BookModel).where(BookModel.id == book_id),
            )
            await session.commit()
            if result.rowcount == 0:
                raise NotFoundError(RESOURCE_NAME, book_id)
            logger.info(f"Book {book_id} deleted", extra={"book_id": book_id})


def _raise_if_invalid(book: Book) -> None:
    reason = validate_book(book)
    if reason is not None:
        raise InvalidInputError(reason, ErrorContext(book_id=book.id or None))


def get_book_store(request: Request) -> BookStore:
    """FastAPI dependency: the store built at startup."""
    return request.app.state.book_store
