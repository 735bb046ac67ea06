"""Request Logging: request id propagation and access log line.

Tests cover:
    - Every response carries X-Request-ID
    - A well-formed inbound X-Request-ID is echoed back
    - One access log record per request with method, path and status
"""

import logging


async def test_response_has_request_id(client):
    res = await client.get("/health_check")
    assert res.headers.get("X-Request-ID")


async def test_request_ids_differ_between_requests(client):
    first = await client.get("/health_check")
    second = await client.get("/health_check")
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


async def test_inbound_request_id_is_echoed(client):
    res = await client.get("/health_check", headers={"X-Request-ID": "abc-123"})
    assert res.headers["X-Request-ID"] == "abc-123"


async def test_oversized_inbound_request_id_is_replaced(client):
    res = await client.get("/health_check", headers={"X-Request-ID": "x" * 500})
    assert res.headers["X-Request-ID"] != "x" * 500


async def test_access_log_written(client, caplog):
    with caplog.at_level(logging.INFO, logger="newsletter.request"):
        await client.post(
            "/subscriptions",
            content="name=engineer%20rust",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
    records = [r for r in caplog.records if r.name == "newsletter.request"]
    assert len(records) == 1
    assert records[0].method == "POST"
    assert records[0].path == "/subscriptions"
    assert records[0].status_code == 400
