"""Circuit CRUD and CSV export endpoints."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from ulid import ULID

from tracker.core.deps import get_record_store, require_role
from tracker.db.base import new_ulid
from tracker.schemas.circuit import CircuitCreate, CircuitRecord
from tracker.services.csv_codec import encode_circuits
from tracker.services.stores import ConflictError, NotFoundError, RecordStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_error(exc: StoreError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    logger.error("Circuit store failure: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


# ─── POST /circuits/create ───

@router.post(
    "/create",
    response_model=CircuitRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create a circuit (admin)",
)
async def create_circuit(
    body: CircuitCreate,
    store: Annotated[RecordStore, Depends(get_record_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    try:
        return await store.create(body.to_record(new_ulid()))
    except StoreError as exc:
        raise _store_error(exc)


# ─── PUT /circuits/update ───

@router.put("/update", response_model=CircuitRecord, summary="Replace a circuit by id (admin)")
async def update_circuit(
    body: CircuitRecord,
    store: Annotated[RecordStore, Depends(get_record_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    try:
        return await store.update(body)
    except StoreError as exc:
        raise _store_error(exc)


# ─── GET /circuits/all ───

@router.get("/all", response_model=list[CircuitRecord], summary="List all circuits")
async def list_circuits(
    store: Annotated[RecordStore, Depends(get_record_store)],
    current_user: Annotated[object, Depends(require_role("admin", "user"))],
):
    try:
        return await store.get_all()
    except StoreError as exc:
        raise _store_error(exc)


# ─── GET /circuits/export ───

@router.get("/export", summary="Download every circuit as CSV")
async def export_circuits(
    store: Annotated[RecordStore, Depends(get_record_store)],
    current_user: Annotated[object, Depends(require_role("admin", "user"))],
):
    try:
        circuits = await store.get_all()
    except StoreError as exc:
        logger.error("Error exporting csv: %s", exc)
        raise _store_error(exc)

    return Response(
        content=encode_circuits(circuits),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="circuits.csv"'},
    )


# ─── GET /circuits/{circuit_id} ───

@router.get("/{circuit_id}", response_model=CircuitRecord, summary="Get one circuit")
async def get_circuit(
    circuit_id: str,
    store: Annotated[RecordStore, Depends(get_record_store)],
    current_user: Annotated[object, Depends(require_role("admin", "user"))],
):
    try:
        ULID.from_str(circuit_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed circuit id")

    try:
        return await store.get(circuit_id)
    except StoreError as exc:
        raise _store_error(exc)
