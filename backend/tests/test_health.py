"""Tests for the health endpoint."""
import pytest
from httpx import AsyncClient, ASGITransport

from tracker.main import app


@pytest.mark.asyncio
async def test_health_returns_200():
    """GET /health should return HTTP 200 with status ok."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_returns_ok_status():
    """GET /health should return JSON body with status == ok."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
    data = response.json()
    assert data["status"] == "ok"


@pytest.mark.asyncio
async def test_favicon_is_empty():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/favicon.ico")
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_root_serves_no_frontend_bundle():
    """The service is API-only: nothing is mounted at / or /assets."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        root = await client.get("/")
        assets = await client.get("/assets/index.js")
    assert root.status_code == 404
    assert assets.status_code == 404
