"""URL Processing Service: check precedence and dispatch.

Tests cover:
    - Fields are trimmed before checks
    - url, then operation presence, then membership, then parse validity
"""

import pytest

from bookshelf.core.errors import BadRequestError
from bookshelf.services.process_url import (
    process_url, URL_REQUIRED, OPERATION_REQUIRED, OPERATION_UNKNOWN, URL_INVALID,
)


def test_trims_fields():
    assert process_url(
        "  https://BYFOOD.com/food-EXPeriences?query=abc/ ", " all ",
    ) == "https://www.byfood.com/food-experiences"


@pytest.mark.parametrize("url, operation, message", [
    ("", "", URL_REQUIRED),
    ("   ", "all", URL_REQUIRED),
    ("https://byfood.com/x", "  ", OPERATION_REQUIRED),
    ("not a url", "nope", OPERATION_UNKNOWN),
    ("https://byfood.com/x", "ALL", OPERATION_UNKNOWN),
    ("byfood.com/abc", "all", URL_INVALID),
    ("not a url", "canonical", URL_INVALID),
])
def test_checks_in_order(url, operation, message):
    with pytest.raises(BadRequestError) as exc:
        process_url(url, operation)
    assert exc.value.message == message
    assert exc.value.http_status == 400


def test_messages():
    assert URL_REQUIRED == "`url` is required"
    assert OPERATION_REQUIRED == "`operation` is required"
    assert OPERATION_UNKNOWN == "`operation` must be one of: canonical, redirection, all"
    assert URL_INVALID == "invalid URL (must include scheme and host)"
