"""Pydantic schemas for CSV bulk import and the import-report log."""
from typing import Literal

from pydantic import BaseModel


class ImportReportEntry(BaseModel):
    type: str
    id: str
    message: str
    file_name: str | None = None
    seen: bool = False

    model_config = {"from_attributes": True}


class ImportAccepted(BaseModel):
    report_id: str
    status: Literal["accepted"] = "accepted"
    file_name: str | None = None


class ReportAcknowledgement(BaseModel):
    id: str
