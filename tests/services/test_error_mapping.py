"""Error Mapping: store failures rendered at the HTTP boundary.

Invariants:
    - InternalError variants (timeout, database) → 500 "internal error", no detail leaked
    - Any other exception → 500 "internal error"
    - NotFoundError → 404 regardless of which store raised it
"""

import pytest

from bookshelf.core.errors import DatabaseError, NotFoundError, StoreTimeoutError


@pytest.mark.parametrize("exc", [
    StoreTimeoutError("list", 3.0),
    DatabaseError("Connection or operational error", "execute"),
    RuntimeError("driver exploded: password=secret"),
])
async def test_store_failures_are_generic_500(failing_client, exc):
    client = failing_client(exc)
    res = await client.get("/books")
    assert res.status_code == 500
    assert res.json() == {"error": "internal error"}


async def test_timeout_on_create_is_500_not_400(failing_client):
    client = failing_client(StoreTimeoutError("create", 3.0))
    res = await client.post("/books", json={"title": "T", "author": "A", "year": 1})
    assert res.status_code == 500
    assert res.json() == {"error": "internal error"}


async def test_database_error_on_update_is_500(failing_client):
    client = failing_client(DatabaseError("Integrity constraint violated", "commit"))
    res = await client.put("/books/1", json={"title": "T", "author": "A", "year": 1})
    assert res.status_code == 500
    assert res.json() == {"error": "internal error"}


async def test_not_found_from_any_store_is_404(failing_client):
    client = failing_client(NotFoundError("book", 5))
    res = await client.delete("/books/5")
    assert res.status_code == 404
    assert res.json() == {"error": "book not found"}
