"""CSV bulk import endpoint for circuits.

The upload is validated and the run's begin report entry is written
synchronously; the rows themselves are applied by a background task after
the 202 response has been sent. Progress is read back through the
/circuits/reports endpoints.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status
from starlette.datastructures import UploadFile

from tracker.core.deps import get_record_store, get_report_store, require_role
from tracker.schemas.imports import ImportAccepted
from tracker.services.circuit_import import CircuitImporter
from tracker.services.csv_codec import decode_payload
from tracker.services.stores import RecordStore, ReportStore

logger = logging.getLogger(__name__)

router = APIRouter()

CSV_CONTENT_TYPE = "text/csv"


def _media_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


# ─── POST /circuits/import ───

@router.post(
    "/import",
    response_model=ImportAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start a background CSV import of circuits (admin)",
)
async def import_circuits(
    request: Request,
    background_tasks: BackgroundTasks,
    records: Annotated[RecordStore, Depends(get_record_store)],
    reports: Annotated[ReportStore, Depends(get_report_store)],
    current_user: Annotated[object, Depends(require_role("admin"))],
):
    # The form is read by hand so a "file" field sent as plain text is a 400
    # rather than a validation 422.
    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file part in upload")
        if _media_type(file.content_type) != CSV_CONTENT_TYPE:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Expected content type {CSV_CONTENT_TYPE}, got '{file.content_type}'",
            )
        content = await file.read()
        file_name = file.filename or None

    try:
        text = decode_payload(content)
    except UnicodeDecodeError as exc:
        logger.warning("Rejected unreadable csv upload %s: %s", file_name, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CSV file is not valid UTF-8")

    importer = CircuitImporter(records, reports)
    try:
        report_id = await importer.start(file_name)
    except Exception as exc:
        logger.error("Failed to begin import report: %s", exc, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not start import report",
        )

    background_tasks.add_task(importer.run, report_id, text, file_name)
    return ImportAccepted(report_id=report_id, file_name=file_name)
