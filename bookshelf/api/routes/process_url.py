"""URL Processor: POST /process-url.

Invariants:
    - Stateless; no database access
    - Failures are BadRequestError (400) rendered by the global handler
"""

from fastapi import APIRouter

from bookshelf.schemas.url import ProcessUrlRequest, ProcessUrlResponse
from bookshelf.services.process_url import process_url

router = APIRouter(tags=["url"])


@router.post("/process-url", response_model=ProcessUrlResponse)
async def process_url_endpoint(body: ProcessUrlRequest):
    """Rewrite a URL using the canonical, redirection, or all operation."""
    return ProcessUrlResponse(
        processed_url=process_url(body.url, body.operation),
    )
