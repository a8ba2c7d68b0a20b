"""Tests for circuit CRUD and CSV export endpoints."""
import pytest
from httpx import AsyncClient, ASGITransport

from conftest import FakeUser, InMemoryCircuitStore
from tracker.core.deps import get_current_user, get_record_store
from tracker.main import app
from tracker.models.circuit import CIRCUIT_FIELDS
from tracker.schemas.circuit import CircuitRecord

EXISTING_ID = "01J9ZQ3V7N4X6M2K8R5T1W0YHC"


@pytest.fixture
def store():
    store = InMemoryCircuitStore([CircuitRecord(id=EXISTING_ID, site_name="HQ", provider="Lumen")])
    app.dependency_overrides[get_record_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


def _as(role: str) -> None:
    async def _user():
        return FakeUser(role=role)

    app.dependency_overrides[get_current_user] = _user


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ─── Create / update ──────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_assigns_id_and_defaults_missing_fields(store):
    _as("admin")
    async with _client() as client:
        response = await client.post("/api/v1/circuits/create", json={"site_name": "Depot", "bw_mbps": "500"})

    assert response.status_code == 201
    data = response.json()
    assert len(data["id"]) == 26
    assert data["site_name"] == "Depot"
    assert data["router_ip"] == ""
    assert data["id"] in store.rows


@pytest.mark.asyncio
async def test_create_is_admin_only(store):
    _as("user")
    async with _client() as client:
        response = await client.post("/api/v1/circuits/create", json={})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_replaces_full_row(store):
    _as("admin")
    async with _client() as client:
        response = await client.put("/api/v1/circuits/update", json={"id": EXISTING_ID, "site_name": "HQ-2"})

    assert response.status_code == 200
    assert store.rows[EXISTING_ID].site_name == "HQ-2"
    assert store.rows[EXISTING_ID].provider == ""


@pytest.mark.asyncio
async def test_update_unknown_id_returns_404(store):
    _as("admin")
    async with _client() as client:
        response = await client.put("/api/v1/circuits/update", json={"id": "01J9ZQ41B2C3D4E5F6G7H8J9KM"})

    assert response.status_code == 404


# ─── Read ─────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_user_can_list_and_get(store):
    _as("user")
    async with _client() as client:
        all_response = await client.get("/api/v1/circuits/all")
        one_response = await client.get(f"/api/v1/circuits/{EXISTING_ID}")

    assert all_response.status_code == 200
    assert [c["id"] for c in all_response.json()] == [EXISTING_ID]
    assert one_response.status_code == 200
    assert one_response.json()["provider"] == "Lumen"


@pytest.mark.asyncio
async def test_get_malformed_id_returns_400(store):
    _as("user")
    async with _client() as client:
        response = await client.get("/api/v1/circuits/not-a-ulid")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_unknown_id_returns_404(store):
    _as("user")
    async with _client() as client:
        response = await client.get("/api/v1/circuits/01J9ZQ41B2C3D4E5F6G7H8J9KM")

    assert response.status_code == 404


# ─── Export ───────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_export_returns_csv_attachment(store):
    _as("user")
    async with _client() as client:
        response = await client.get("/api/v1/circuits/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="circuits.csv"' in response.headers["content-disposition"]
    lines = response.text.splitlines()
    assert lines[0] == ",".join(CIRCUIT_FIELDS)
    assert lines[1].startswith(f"{EXISTING_ID},,HQ,")
