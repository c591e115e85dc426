from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.breedings import BreedingsRepository
from src.domain.models.breeding import Breeding
from src.infrastructure.db.orm.breeding import BreedingORM


class BreedingsSQLAlchemyRepository(BreedingsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingORM) -> Breeding:
        return Breeding(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            type=orm.type,
            date=orm.date,
            estrus_id=orm.estrus_id,
            sire_animal_id=orm.sire_animal_id,
            sire_info=orm.sire_info,
            semen_batch=orm.semen_batch,
            technician=orm.technician,
            protocol_id=orm.protocol_id,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, breeding: Breeding) -> Breeding:
        orm = BreedingORM(
            id=breeding.id,
            farm_id=breeding.farm_id,
            animal_id=breeding.animal_id,
            type=breeding.type,
            date=breeding.date,
            estrus_id=breeding.estrus_id,
            sire_animal_id=breeding.sire_animal_id,
            sire_info=breeding.sire_info,
            semen_batch=breeding.semen_batch,
            technician=breeding.technician,
            protocol_id=breeding.protocol_id,
            notes=breeding.notes,
            created_at=breeding.created_at,
            updated_at=breeding.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record breeding") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, breeding_id: UUID) -> Breeding | None:
        stmt = select(BreedingORM).where(
            BreedingORM.farm_id == farm_id,
            BreedingORM.id == breeding_id,
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Breeding]:
        stmt = select(BreedingORM).where(BreedingORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(BreedingORM.animal_id == animal_id)
        stmt = stmt.order_by(desc(BreedingORM.date), desc(BreedingORM.created_at))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
