"""Import-report notifications: list runs and acknowledge finished ones."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from tracker.core.deps import get_report_store, require_role
from tracker.schemas.imports import ImportReportEntry, ReportAcknowledgement
from tracker.services.stores import NotFoundError, NotificationReader, StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/get/all", response_model=list[ImportReportEntry], summary="Every report entry (admin)")
async def get_all_reports(
    store: Annotated[NotificationReader, Depends(get_report_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    try:
        return await store.get_all()
    except StoreError as exc:
        logger.error("Failed to list import reports: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get(
    "/get/unseen",
    response_model=list[ImportReportEntry],
    summary="Finished imports not yet acknowledged (admin)",
)
async def get_unseen_reports(
    store: Annotated[NotificationReader, Depends(get_report_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    try:
        return await store.get_new()
    except StoreError as exc:
        logger.error("Failed to list unseen import reports: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/acknowledge", summary="Mark a report entry as seen (admin)")
async def acknowledge_report(
    body: ReportAcknowledgement,
    store: Annotated[NotificationReader, Depends(get_report_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    try:
        await store.acknowledge(body.id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except StoreError as exc:
        logger.error("Failed to acknowledge report %s: %s", body.id, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    return {"id": body.id, "seen": True}
