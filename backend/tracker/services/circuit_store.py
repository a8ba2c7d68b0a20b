"""SQLAlchemy-backed circuit store."""
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.models.circuit import Circuit
from tracker.schemas.circuit import CircuitRecord
from tracker.services.stores import ConflictError, NotFoundError, StoreError

logger = logging.getLogger(__name__)


class SqlCircuitStore:
    """RecordStore over the circuits table.

    Every call runs in its own session and commits before returning, so a
    store instance can outlive the request that created it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_all(self) -> list[CircuitRecord]:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(Circuit).order_by(Circuit.id))
            except SQLAlchemyError as exc:
                raise StoreError(str(exc)) from exc
            return [CircuitRecord.model_validate(c) for c in result.scalars().all()]

    async def get(self, circuit_id: str) -> CircuitRecord:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(Circuit).where(Circuit.id == circuit_id))
            except SQLAlchemyError as exc:
                raise StoreError(str(exc)) from exc
            circuit = result.scalar_one_or_none()
        if circuit is None:
            raise NotFoundError(f"Circuit {circuit_id} not found")
        return CircuitRecord.model_validate(circuit)

    async def create(self, circuit: CircuitRecord) -> CircuitRecord:
        async with self._session_factory() as db:
            db.add(Circuit(**circuit.model_dump()))
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise ConflictError(f"Circuit {circuit.id} already exists") from exc
            except SQLAlchemyError as exc:
                await db.rollback()
                raise StoreError(str(exc)) from exc
        logger.debug("Created circuit %s", circuit.id)
        return circuit

    async def update(self, circuit: CircuitRecord) -> CircuitRecord:
        values = circuit.model_dump(exclude={"id"})
        async with self._session_factory() as db:
            try:
                result = await db.execute(
                    update(Circuit).where(Circuit.id == circuit.id).values(**values)
                )
                if result.rowcount == 0:
                    await db.rollback()
                    raise NotFoundError(f"Circuit {circuit.id} not found")
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                raise StoreError(str(exc)) from exc
        logger.debug("Updated circuit %s", circuit.id)
        return circuit
