"""Error Handlers — verifies every failure renders the structured envelope.

Invariants:
    - Unknown path → 404 ROUTE_NOT_FOUND
    - Known path, wrong method → 405 METHOD_NOT_ALLOWED with Allow header
    - UserHubError raised in a route → its own status and code
    - Unhandled exception → 500 INTERNAL_ERROR without internal details
    - Every error body carries the same keys; validation adds details
    - Log level follows error severity

Design Decisions:
    - Domain and catch-all handlers exercised on a throwaway app so the
      production router stays untouched
"""

import logging

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from userhub.api.error_handlers import register_error_handlers
from userhub.core.errors import ErrorCategory, RouteNotFoundError, UserHubError

ENVELOPE_KEYS = {"code", "message", "category", "severity", "timestamp", "context"}


async def test_unknown_route_returns_404_envelope(client):
    res = await client.get("/api/nope")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "ROUTE_NOT_FOUND"
    assert error["category"] == "routing"
    assert error["context"] == {"path": "/api/nope", "method": "GET"}


async def test_wrong_method_returns_405_with_allow_header(client):
    res = await client.post("/api/users")
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert "GET" in res.headers["allow"]


@pytest.fixture
async def scratch_client():
    """Client over a bare app with only the error handlers registered."""
    scratch = FastAPI()
    register_error_handlers(scratch)

    @scratch.get("/domain")
    async def raise_domain():
        raise UserHubError(
            "Teapot refused", "TEAPOT", ErrorCategory.INTERNAL, http_status=418,
        )

    @scratch.get("/missing")
    async def raise_not_found():
        raise RouteNotFoundError("/missing")

    @scratch.get("/http")
    async def raise_http():
        raise HTTPException(status_code=403, detail="Forbidden here")

    @scratch.get("/boom")
    async def raise_unexpected():
        raise RuntimeError("secret internals")

    @scratch.get("/typed/{item_id}")
    async def typed(item_id: int):
        return {"item_id": item_id}

    async with AsyncClient(
        transport=ASGITransport(app=scratch, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_domain_error_uses_its_status_and_code(scratch_client):
    res = await scratch_client.get("/domain")
    assert res.status_code == 418
    error = res.json()["error"]
    assert error["code"] == "TEAPOT"
    assert error["message"] == "Teapot refused"


async def test_other_http_errors_keep_status(scratch_client):
    res = await scratch_client.get("/http")
    assert res.status_code == 403
    error = res.json()["error"]
    assert error["code"] == "HTTP_403"
    assert error["message"] == "Forbidden here"
    assert error["category"] == "http"


async def test_validation_error_returns_400_with_details(scratch_client):
    res = await scratch_client.get("/typed/not-a-number")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert error["details"][0]["field"] == "path.item_id"


async def test_unhandled_exception_never_leaks_details(scratch_client):
    res = await scratch_client.get("/boom")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["context"] == {"path": "/boom", "method": "GET"}
    assert "secret" not in res.text


@pytest.mark.parametrize("path, extra_keys", [
    ("/domain", set()),
    ("/missing", set()),
    ("/http", set()),
    ("/nowhere", set()),
    ("/boom", set()),
    ("/typed/x", {"details"}),
])
async def test_every_error_path_shares_one_envelope(scratch_client, path, extra_keys):
    res = await scratch_client.get(path)
    assert res.status_code >= 400
    assert set(res.json()) == {"error"}
    assert set(res.json()["error"]) == ENVELOPE_KEYS | extra_keys


async def test_warning_severity_errors_log_at_warning(scratch_client, caplog):
    with caplog.at_level(logging.DEBUG, logger="userhub.api.error_handlers"):
        await scratch_client.get("/missing")
    records = [r for r in caplog.records if r.name == "userhub.api.error_handlers"]
    assert [r.levelno for r in records] == [logging.WARNING]
    assert records[0].error_code == "ROUTE_NOT_FOUND"


async def test_default_severity_errors_log_at_error(scratch_client, caplog):
    with caplog.at_level(logging.DEBUG, logger="userhub.api.error_handlers"):
        await scratch_client.get("/domain")
    records = [r for r in caplog.records if r.name == "userhub.api.error_handlers"]
    assert [r.levelno for r in records] == [logging.ERROR]


async def test_unhandled_exception_logs_critical_with_traceback(scratch_client, caplog):
    with caplog.at_level(logging.DEBUG, logger="userhub.api.error_handlers"):
        await scratch_client.get("/boom")
    records = [r for r in caplog.records if r.name == "userhub.api.error_handlers"]
    assert [r.levelno for r in records] == [logging.CRITICAL]
    assert records[0].exc_info is not None
