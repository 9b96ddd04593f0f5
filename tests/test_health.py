"""Smoke tests for health and app wiring."""

from httpx import AsyncClient

from app.core.config import get_settings


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("version") == get_settings().app_version


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["code"] == 404


async def test_request_id_generated(client: AsyncClient) -> None:
    """Every response carries an X-Request-ID header."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("x-request-id")


async def test_request_id_forwarded(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers.get("x-request-id") == "abc-123"


async def test_request_id_sanitized(client: AsyncClient) -> None:
    """Client ids with unsafe characters are replaced."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id; drop"}
    )
    assert response.headers.get("x-request-id") != "bad id; drop"
