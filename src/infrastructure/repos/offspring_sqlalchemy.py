from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.calvings import OffspringRepository
from src.domain.models.offspring import Offspring
from src.infrastructure.db.orm.calving import OffspringORM


class OffspringSQLAlchemyRepository(OffspringRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: OffspringORM) -> Offspring:
        return Offspring(
            id=orm.id,
            calving_id=orm.calving_id,
            sex=orm.sex,
            condition=orm.condition,
            animal_id=orm.animal_id,
            weight=orm.weight,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, offspring: Offspring) -> Offspring:
        orm = OffspringORM(
            id=offspring.id,
            calving_id=offspring.calving_id,
            sex=offspring.sex,
            condition=offspring.condition,
            animal_id=offspring.animal_id,
            weight=offspring.weight,
            notes=offspring.notes,
            created_at=offspring.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record offspring") from exc
        return self._to_domain(orm)

    async def update(self, offspring: Offspring) -> Offspring:
        orm = await self.session.get(OffspringORM, offspring.id)
        if not orm:
            raise NotFound(f"Offspring {offspring.id} not found")
        orm.animal_id = offspring.animal_id
        orm.weight = offspring.weight
        orm.notes = offspring.notes
        await self.session.flush()
        return self._to_domain(orm)

    async def count_by_calving(self, calving_id: UUID) -> int:
        stmt = select(func.count(OffspringORM.id)).where(OffspringORM.calving_id == calving_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_by_calving(self, calving_id: UUID) -> list[Offspring]:
        stmt = (
            select(OffspringORM)
            .where(OffspringORM.calving_id == calving_id)
            .order_by(OffspringORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
