"""Persistence capabilities used by the API and the import pipeline.

Circuit CRUD and import reporting are separate capabilities: a store may
implement one without the other. All methods are coroutines and raise
StoreError (or a subclass) on failure.
"""
from typing import Protocol

from tracker.schemas.circuit import CircuitRecord
from tracker.schemas.imports import ImportReportEntry


class StoreError(Exception):
    """A persistence call failed."""


class NotFoundError(StoreError):
    """No row with the requested id."""


class ConflictError(StoreError):
    """The write collides with an existing row (duplicate id)."""


class RecordStore(Protocol):
    async def get_all(self) -> list[CircuitRecord]: ...

    async def get(self, circuit_id: str) -> CircuitRecord: ...

    async def create(self, circuit: CircuitRecord) -> CircuitRecord: ...

    async def update(self, circuit: CircuitRecord) -> CircuitRecord: ...


class ReportStore(Protocol):
    async def report(self, entry: ImportReportEntry) -> ImportReportEntry: ...

    async def acknowledge(self, report_id: str) -> None: ...

    async def finish(self, report_id: str, message: str) -> None: ...


class NotificationReader(Protocol):
    async def get_all(self) -> list[ImportReportEntry]: ...

    async def get_new(self) -> list[ImportReportEntry]: ...

    async def acknowledge(self, report_id: str) -> None: ...
