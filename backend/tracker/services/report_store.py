"""SQLAlchemy-backed import-report log (ReportStore + NotificationReader)."""
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.models.import_report import REPORT_TYPE_FINISH, ImportReport
from tracker.schemas.imports import ImportReportEntry
from tracker.services.stores import ConflictError, NotFoundError, StoreError


class SqlReportStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    # ─── ReportStore ───

    async def report(self, entry: ImportReportEntry) -> ImportReportEntry:
        async with self._session_factory() as db:
            db.add(
                ImportReport(
                    id=entry.id,
                    type=entry.type,
                    message=entry.message,
                    file_name=entry.file_name,
                    seen=entry.seen,
                )
            )
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise ConflictError(f"Report {entry.id} already exists") from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                raise StoreError(str(exc)) from exc
        return entry

    async def acknowledge(self, report_id: str) -> None:
        await self._update(report_id, seen=True)

    async def finish(self, report_id: str, message: str) -> None:
        await self._update(report_id, message=message)

    async def _update(self, report_id: str, **values) -> None:
        async with self._session_factory() as db:
            try:
                result = await db.execute(
                    update(ImportReport).where(ImportReport.id == report_id).values(**values)
                )
                if result.rowcount == 0:
                    await db.rollback()
                    raise NotFoundError(f"Report {report_id} not found")
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                raise StoreError(str(exc)) from exc

    # ─── NotificationReader ───

    async def get_all(self) -> list[ImportReportEntry]:
        return await self._select(select(ImportReport))

    async def get_new(self) -> list[ImportReportEntry]:
        return await self._select(
            select(ImportReport).where(
                ImportReport.type == REPORT_TYPE_FINISH,
                ImportReport.seen.is_(False),
            )
        )

    async def _select(self, stmt) -> list[ImportReportEntry]:
        async with self._session_factory() as db:
            try:
                result = await db.execute(stmt.order_by(ImportReport.created_at, ImportReport.id))
            except SQLAlchemyError as exc:
                raise StoreError(str(exc)) from exc
            return [ImportReportEntry.model_validate(r) for r in result.scalars().all()]
