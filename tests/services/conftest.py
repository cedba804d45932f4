"""Service test fixtures: in-memory database, BookStore, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the books table created
    - get_book_store / get_db_manager overridden; the app lifespan never runs under ASGITransport

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same SQL surface the store uses
    - fake_repository: in-memory BookRepository for error-mapping tests that need
      failures the real database cannot produce on demand
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bookshelf.core.domain_types import Book
from bookshelf.infrastructure.database import DatabaseSessionManager, get_db_manager
from bookshelf.main import app
from bookshelf.services.book_store import BookStore, get_book_store


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def book_store(db_manager):
    return BookStore(db_manager)


@pytest.fixture
async def client(db_manager, book_store):
    """FastAPI test client wired to the in-memory store."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_book_store] = lambda: book_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def dune():
    return Book(title="Dune", author="Frank Herbert", year=1965)


class FailingRepository:
    """BookRepository whose every call raises the configured exception."""

    def __init__(self, exc: Exception):
        self.exc = exc

    async def list_books(self) -> list[Book]:
        raise self.exc

    async def get_book(self, book_id):
        raise self.exc

    async def create_book(self, book):
        raise self.exc

    async def update_book(self, book_id, book):
        raise self.exc

    async def delete_book(self, book_id):
        raise self.exc


@pytest.fixture
async def failing_client():
    """Factory: a client whose store raises exc. Unhandled exceptions become 500s."""
    made: list[AsyncClient] = []

    def _make(exc: Exception) -> AsyncClient:
        app.dependency_overrides[get_book_store] = lambda: FailingRepository(exc)
        c = AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )
        made.append(c)
        return c

    yield _make

    for c in made:
        await c.aclose()
    app.dependency_overrides.clear()
