"""Books CRUD: thin routes over the BookRepository.

Invariants:
    - Routes never contain business logic; validation and not-found live in the store
    - Errors propagate as BookshelfError and are rendered by api/error_handlers.py
    - PUT decodes its body only after the id is accepted
    - Create answers 201, Delete answers 204 with an empty body, the rest 200
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from bookshelf.api.dependencies import parse_book_id
from bookshelf.core.domain_types import BookId
from bookshelf.core.errors import InvalidJSONBodyError
from bookshelf.core.repository_protocols import BookRepository
from bookshelf.schemas.book import BookPayload, BookResponse
from bookshelf.services.book_store import get_book_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookResponse])
async def list_books(store: BookRepository = Depends(get_book_store)):
    """List all books, ordered by id."""
    return await store.list_books()


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookPayload, store: BookRepository = Depends(get_book_store),
):
    """Create a book. Any id in the body is ignored."""
    return await store.create_book(body.to_domain())


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: BookId = Depends(parse_book_id),
    store: BookRepository = Depends(get_book_store),
):
    return await store.get_book(book_id)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    request: Request,
    book_id: BookId = Depends(parse_book_id),
    store: BookRepository = Depends(get_book_store),
):
    """Replace title, author and year of an existing book.

    The body is decoded here, after the id dependency, so a bad id wins
    over a bad body.
    """
    body = await _decode_payload(request)
    return await store.update_book(book_id, body.to_domain())


async def _decode_payload(request: Request) -> BookPayload:
    try:
        return BookPayload.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Undecodable book body on {request.url.path}: {e.errors()}")
        raise InvalidJSONBodyError()


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_book(
    book_id: BookId = Depends(parse_book_id),
    store: BookRepository = Depends(get_book_store),
):
    await store.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
