"""URL Processing Service: request checks and dispatch to the pure normalizer.

Invariants:
    - Both fields are trimmed before any check
    - Checks run in fixed order: url present, operation present, operation known, URL parseable
    - Each failure raises BadRequestError with its fixed message
"""

from bookshelf.core.domain_types import UrlOperation
from bookshelf.core.errors import BadRequestError
from bookshelf.core.normalize_url import normalize_url, parse_url


URL_REQUIRED = "`url` is required"
OPERATION_REQUIRED = "`operation` is required"
OPERATION_UNKNOWN = f"`operation` must be one of: {UrlOperation.names()}"
URL_INVALID = "invalid URL (must include scheme and host)"


def process_url(raw_url: str, raw_operation: str) -> str:
    """Validate the request fields and return the normalized URL."""
    url = raw_url.strip()
    operation = raw_operation.strip()

    if not url:
        raise BadRequestError(URL_REQUIRED, "URL_REQUIRED")
    if not operation:
        raise BadRequestError(OPERATION_REQUIRED, "OPERATION_REQUIRED")
    if operation not in {op.value for op in UrlOperation}:
        raise BadRequestError(OPERATION_UNKNOWN, "OPERATION_UNKNOWN")

    parsed = parse_url(url)
    if parsed is None:
        raise BadRequestError(URL_INVALID, "URL_INVALID")

    return normalize_url(parsed, UrlOperation(operation))
