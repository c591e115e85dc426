from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.breedings import EstrusRepository
from src.domain.models.estrus import EstrusEvent
from src.infrastructure.db.orm.breeding import EstrusORM


class EstrusSQLAlchemyRepository(EstrusRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EstrusORM) -> EstrusEvent:
        return EstrusEvent(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            detected_at=orm.detected_at,
            detection_method=orm.detection_method,
            intensity=orm.intensity,
            notes=orm.notes,
            recorded_by=orm.recorded_by,
            created_at=orm.created_at,
        )

    async def add(self, estrus: EstrusEvent) -> EstrusEvent:
        orm = EstrusORM(
            id=estrus.id,
            farm_id=estrus.farm_id,
            animal_id=estrus.animal_id,
            detected_at=estrus.detected_at,
            detection_method=estrus.detection_method,
            intensity=estrus.intensity,
            notes=estrus.notes,
            recorded_by=estrus.recorded_by,
            created_at=estrus.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record estrus") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, estrus_id: UUID) -> EstrusEvent | None:
        stmt = select(EstrusORM).where(EstrusORM.farm_id == farm_id, EstrusORM.id == estrus_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[EstrusEvent]:
        stmt = select(EstrusORM).where(EstrusORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(EstrusORM.animal_id == animal_id)
        stmt = stmt.order_by(desc(EstrusORM.detected_at))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
