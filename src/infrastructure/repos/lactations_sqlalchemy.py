from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.lactations import LactationsRepository
from src.domain.models.lactation import Lactation
from src.infrastructure.db.orm.lactation import LactationORM


class LactationsSQLAlchemyRepository(LactationsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: LactationORM) -> Lactation:
        return Lactation(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            number=orm.number,
            start_date=orm.start_date,
            end_date=orm.end_date,
            status=orm.status,
            calving_id=orm.calving_id,
            days_in_milk=orm.days_in_milk,
            total_production=orm.total_production,
            daily_average=orm.daily_average,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _to_orm(self, lactation: Lactation) -> LactationORM:
        return LactationORM(
            id=lactation.id,
            farm_id=lactation.farm_id,
            animal_id=lactation.animal_id,
            number=lactation.number,
            start_date=lactation.start_date,
            end_date=lactation.end_date,
            status=lactation.status,
            calving_id=lactation.calving_id,
            days_in_milk=lactation.days_in_milk,
            total_production=lactation.total_production,
            daily_average=lactation.daily_average,
            created_at=lactation.created_at,
            updated_at=lactation.updated_at,
            version=lactation.version,
        )

    async def add(self, lactation: Lactation) -> Lactation:
        orm = self._to_orm(lactation)
        # Savepoint so a lost numbering race leaves the outer transaction usable
        try:
            async with self.session.begin_nested():
                self.session.add(orm)
        except IntegrityError as exc:
            raise ConflictError(
                f"Lactation number {lactation.number} already exists for animal",
                details={"animal_id": str(lactation.animal_id), "number": lactation.number},
            ) from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, lactation_id: UUID) -> Lactation | None:
        stmt = (
            select(LactationORM)
            .where(LactationORM.farm_id == farm_id)
            .where(LactationORM.id == lactation_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def count_by_animal(self, animal_id: UUID) -> int:
        stmt = select(func.count(LactationORM.id)).where(LactationORM.animal_id == animal_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Lactation]:
        stmt = select(LactationORM).where(LactationORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(LactationORM.animal_id == animal_id)
        stmt = stmt.order_by(LactationORM.animal_id, LactationORM.number)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, lactation: Lactation) -> Lactation:
        stmt = (
            select(LactationORM)
            .where(LactationORM.farm_id == lactation.farm_id)
            .where(LactationORM.id == lactation.id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()

        if orm:
            orm.status = lactation.status
            orm.end_date = lactation.end_date
            orm.days_in_milk = lactation.days_in_milk
            orm.total_production = lactation.total_production
            orm.daily_average = lactation.daily_average
            orm.updated_at = lactation.updated_at
            orm.version = lactation.version
            await self.session.flush()
            return self._to_domain(orm)

        raise NotFound(f"Lactation {lactation.id} not found")
