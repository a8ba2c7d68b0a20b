"""Asynchronous bulk import of circuits from CSV.

start() writes the run's begin entry and is the only step whose failure
reaches the caller. run() is the detached unit of work: it drains every
row through the record store, appends an error entry for each failed row
and finally rewrites the begin entry with the summary.

Report writes inside run() are best-effort: they are logged and dropped,
and never interrupt row processing. Rows are applied one at a time in
file order. Runs are neither bounded in number nor cancellable.
"""
import logging

from tracker.db.base import new_ulid
from tracker.models.import_report import REPORT_TYPE_ERROR, REPORT_TYPE_FINISH
from tracker.schemas.circuit import CircuitRecord
from tracker.schemas.imports import ImportReportEntry
from tracker.services.csv_codec import RowError, decode_rows
from tracker.services.stores import RecordStore, ReportStore

logger = logging.getLogger(__name__)

IN_PROGRESS_MESSAGE = "In progress"


def finished_message(error_count: int) -> str:
    return f"Finished import with {error_count} errors"


class CircuitImporter:
    def __init__(self, records: RecordStore, reports: ReportStore):
        self.records = records
        self.reports = reports

    async def start(self, file_name: str | None) -> str:
        """Write the begin entry and return the run's report id.

        Raises whatever the report store raises; no run may start without it.
        """
        report_id = new_ulid()
        await self.reports.report(
            ImportReportEntry(
                type=REPORT_TYPE_FINISH,
                id=report_id,
                message=IN_PROGRESS_MESSAGE,
                file_name=file_name,
            )
        )
        logger.info("Import %s started (file=%s)", report_id, file_name)
        return report_id

    async def run(self, report_id: str, text: str, file_name: str | None) -> int:
        """Apply every row of ``text`` and return the number of failed rows."""
        error_count = 0

        for result in decode_rows(text):
            if isinstance(result, RowError):
                logger.warning("Import %s: unreadable row: %s", report_id, result)
                await self._report_error(report_id, str(result), file_name)
                error_count += 1
                continue

            try:
                await self._apply(result.values)
            except Exception as exc:
                message = f"Line {result.line}: {exc}"
                logger.warning("Import %s: %s", report_id, message)
                await self._report_error(report_id, message, file_name)
                error_count += 1

        try:
            await self.reports.finish(report_id, finished_message(error_count))
        except Exception:
            logger.error("Import %s: failed to write final report", report_id, exc_info=True)

        logger.info("Import %s finished with %d errors", report_id, error_count)
        return error_count

    async def _apply(self, values: dict[str, str]) -> None:
        if not values["id"]:
            circuit = CircuitRecord(**{**values, "id": new_ulid()})
            await self.records.create(circuit)
            logger.debug("Imported new circuit %s", circuit.id)
        else:
            circuit = CircuitRecord(**values)
            await self.records.update(circuit)
            logger.debug("Imported update for circuit %s", circuit.id)

    async def _report_error(self, report_id: str, message: str, file_name: str | None) -> None:
        try:
            await self.reports.report(
                ImportReportEntry(
                    type=REPORT_TYPE_ERROR,
                    id=new_ulid(),
                    message=message,
                    file_name=file_name,
                )
            )
        except Exception:
            logger.error("Import %s: failed to record row error", report_id, exc_info=True)
