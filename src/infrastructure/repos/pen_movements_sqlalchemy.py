from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.pen_movements import PenMovementsRepository
from src.domain.models.pen_movement import PenMovement
from src.infrastructure.db.orm.pen import PenMovementORM


class PenMovementsSQLAlchemyRepository(PenMovementsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PenMovementORM) -> PenMovement:
        return PenMovement(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            destination_pen_id=orm.destination_pen_id,
            moved_at=orm.moved_at,
            origin_pen_id=orm.origin_pen_id,
            reason=orm.reason,
            moved_by=orm.moved_by,
            created_at=orm.created_at,
        )

    async def add(self, movement: PenMovement) -> PenMovement:
        orm = PenMovementORM(
            id=movement.id,
            farm_id=movement.farm_id,
            animal_id=movement.animal_id,
            origin_pen_id=movement.origin_pen_id,
            destination_pen_id=movement.destination_pen_id,
            moved_at=movement.moved_at,
            reason=movement.reason,
            moved_by=movement.moved_by,
            created_at=movement.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record pen movement") from exc
        return self._to_domain(orm)

    async def list_by_animal(self, farm_id: UUID, animal_id: UUID) -> list[PenMovement]:
        stmt = (
            select(PenMovementORM)
            .where(PenMovementORM.farm_id == farm_id)
            .where(PenMovementORM.animal_id == animal_id)
            .order_by(desc(PenMovementORM.moved_at))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
