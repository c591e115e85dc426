from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.calvings import CalvingsRepository
from src.domain.models.calving import Calving
from src.infrastructure.db.orm.calving import CalvingORM


class CalvingsSQLAlchemyRepository(CalvingsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: CalvingORM) -> Calving:
        return Calving(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            date=orm.date,
            offspring_count=orm.offspring_count,
            pregnancy_id=orm.pregnancy_id,
            type=orm.type,
            complications=orm.complications,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, calving: Calving) -> Calving:
        orm = CalvingORM(
            id=calving.id,
            farm_id=calving.farm_id,
            animal_id=calving.animal_id,
            date=calving.date,
            offspring_count=calving.offspring_count,
            pregnancy_id=calving.pregnancy_id,
            type=calving.type,
            complications=calving.complications,
            notes=calving.notes,
            created_at=calving.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record calving") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, calving_id: UUID) -> Calving | None:
        stmt = select(CalvingORM).where(CalvingORM.farm_id == farm_id, CalvingORM.id == calving_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Calving]:
        stmt = select(CalvingORM).where(CalvingORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(CalvingORM.animal_id == animal_id)
        stmt = stmt.order_by(desc(CalvingORM.date), desc(CalvingORM.created_at))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
