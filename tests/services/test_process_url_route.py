"""POST /process-url: HTTP contract for the URL processor."""

import pytest


@pytest.mark.parametrize("body, expected", [
    (
        {"url": "https://BYFOOD.com/food-EXPeriences?query=abc/", "operation": "all"},
        "https://www.byfood.com/food-experiences",
    ),
    (
        {"url": "https://BYFOOD.com/food-EXPeriences?query=abc/", "operation": "canonical"},
        "https://BYFOOD.com/food-EXPeriences",
    ),
    (
        {"url": "https://BYFOOD.com/food-EXPeriences?query=ABC/", "operation": "redirection"},
        "https://www.byfood.com/food-experiences?query=abc/",
    ),
])
async def test_operations(client, body, expected):
    res = await client.post("/process-url", json=body)
    assert res.status_code == 200
    assert res.json() == {"processed_url": expected}


@pytest.mark.parametrize("body, message", [
    ({"operation": "all"}, "`url` is required"),
    ({"url": None, "operation": "all"}, "`url` is required"),
    ({"url": "https://byfood.com/x"}, "`operation` is required"),
    (
        {"url": "https://byfood.com/x", "operation": "nope"},
        "`operation` must be one of: canonical, redirection, all",
    ),
    ({"url": "not a url", "operation": "all"}, "invalid URL (must include scheme and host)"),
    ({"url": "byfood.com/abc", "operation": "all"}, "invalid URL (must include scheme and host)"),
    (
        {"url": "https://byfood.com:abc/x", "operation": "canonical"},
        "invalid URL (must include scheme and host)",
    ),
    (
        {"url": "https://by food.com/x", "operation": "canonical"},
        "invalid URL (must include scheme and host)",
    ),
])
async def test_bad_requests(client, body, message):
    res = await client.post("/process-url", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": message}


@pytest.mark.parametrize("content", [b'{"url":', b'{"url": 5, "operation": "all"}'])
async def test_undecodable_body(client, content):
    res = await client.post(
        "/process-url", content=content,
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "invalid JSON body"}
