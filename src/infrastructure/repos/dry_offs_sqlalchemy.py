from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.calvings import DryOffsRepository
from src.domain.models.dry_off import DryOff
from src.infrastructure.db.orm.calving import DryOffORM


class DryOffsSQLAlchemyRepository(DryOffsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DryOffORM) -> DryOff:
        return DryOff(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            date=orm.date,
            pregnancy_id=orm.pregnancy_id,
            expected_calving_date=orm.expected_calving_date,
            protocol=orm.protocol,
            reason=orm.reason,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, dry_off: DryOff) -> DryOff:
        orm = DryOffORM(
            id=dry_off.id,
            farm_id=dry_off.farm_id,
            animal_id=dry_off.animal_id,
            date=dry_off.date,
            pregnancy_id=dry_off.pregnancy_id,
            expected_calving_date=dry_off.expected_calving_date,
            protocol=dry_off.protocol,
            reason=dry_off.reason,
            notes=dry_off.notes,
            created_at=dry_off.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record dry-off") from exc
        return self._to_domain(orm)

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[DryOff]:
        stmt = select(DryOffORM).where(DryOffORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(DryOffORM.animal_id == animal_id)
        stmt = stmt.order_by(desc(DryOffORM.date))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
