"""Shared test doubles: in-memory stores and a fake user."""
import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("APP_ENV", "test")

import pytest

from tracker.models.import_report import REPORT_TYPE_FINISH
from tracker.schemas.circuit import CircuitRecord
from tracker.schemas.imports import ImportReportEntry
from tracker.services.stores import ConflictError, NotFoundError, StoreError


class FakeUser:
    """Minimal user stub for dependency overrides."""

    def __init__(self, role: str = "admin", username: str = "admin"):
        self.id = "01J9ZQ3V7N4X6M2K8R5T1W0YHC"
        self.username = username
        self.role = role
        self.is_active = True


class InMemoryCircuitStore:
    """RecordStore keeping rows in a dict; records every call it receives."""

    def __init__(self, circuits: list[CircuitRecord] | None = None):
        self.rows: dict[str, CircuitRecord] = {c.id: c for c in circuits or []}
        self.calls: list[tuple[str, str]] = []

    async def get_all(self) -> list[CircuitRecord]:
        self.calls.append(("get_all", ""))
        return [self.rows[k] for k in sorted(self.rows)]

    async def get(self, circuit_id: str) -> CircuitRecord:
        self.calls.append(("get", circuit_id))
        if circuit_id not in self.rows:
            raise NotFoundError(f"Circuit {circuit_id} not found")
        return self.rows[circuit_id]

    async def create(self, circuit: CircuitRecord) -> CircuitRecord:
        self.calls.append(("create", circuit.id))
        if circuit.id in self.rows:
            raise ConflictError(f"Circuit {circuit.id} already exists")
        self.rows[circuit.id] = circuit
        return circuit

    async def update(self, circuit: CircuitRecord) -> CircuitRecord:
        self.calls.append(("update", circuit.id))
        if circuit.id not in self.rows:
            raise NotFoundError(f"Circuit {circuit.id} not found")
        self.rows[circuit.id] = circuit
        return circuit


class InMemoryReportStore:
    """ReportStore + NotificationReader over a list, in insertion order."""

    def __init__(self):
        self.entries: list[ImportReportEntry] = []
        self.finish_calls: list[tuple[str, str]] = []

    def _find(self, report_id: str) -> ImportReportEntry:
        for entry in self.entries:
            if entry.id == report_id:
                return entry
        raise NotFoundError(f"Report {report_id} not found")

    async def report(self, entry: ImportReportEntry) -> ImportReportEntry:
        self.entries.append(entry.model_copy())
        return entry

    async def acknowledge(self, report_id: str) -> None:
        self._find(report_id).seen = True

    async def finish(self, report_id: str, message: str) -> None:
        self.finish_calls.append((report_id, message))
        self._find(report_id).message = message

    async def get_all(self) -> list[ImportReportEntry]:
        return list(self.entries)

    async def get_new(self) -> list[ImportReportEntry]:
        return [e for e in self.entries if e.type == REPORT_TYPE_FINISH and not e.seen]


class UnavailableReportStore(InMemoryReportStore):
    """Every write fails, as if the database were down."""

    async def report(self, entry: ImportReportEntry) -> ImportReportEntry:
        raise StoreError("report store unavailable")

    async def finish(self, report_id: str, message: str) -> None:
        raise StoreError("report store unavailable")


class FlakyReportStore(InMemoryReportStore):
    """Accepts the begin entry, then fails every error-entry write."""

    async def report(self, entry: ImportReportEntry) -> ImportReportEntry:
        if entry.type != REPORT_TYPE_FINISH:
            raise StoreError("report store unavailable")
        return await super().report(entry)


@pytest.fixture
def circuit_store() -> InMemoryCircuitStore:
    return InMemoryCircuitStore()


@pytest.fixture
def report_store() -> InMemoryReportStore:
    return InMemoryReportStore()
