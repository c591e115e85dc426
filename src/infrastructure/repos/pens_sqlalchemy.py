from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, PersistenceError
from src.domain.models.pen import Pen
from src.domain.ports.pens_repo import PensRepo
from src.infrastructure.db.orm.pen import PenORM


class PensSQLAlchemyRepository(PensRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PenORM) -> Pen:
        return Pen(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            type=orm.type,
            description=orm.description,
            active=orm.active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, pen: Pen) -> Pen:
        orm = PenORM(
            id=pen.id,
            farm_id=pen.farm_id,
            name=pen.name,
            type=pen.type,
            description=pen.description,
            active=pen.active,
            created_at=pen.created_at,
            updated_at=pen.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create pen") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, pen_id: UUID) -> Pen | None:
        stmt = select(PenORM).where(PenORM.farm_id == farm_id, PenORM.id == pen_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_id(self, pen_id: UUID) -> Pen | None:
        orm = await self.session.get(PenORM, pen_id)
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, farm_id: UUID, name: str) -> Pen | None:
        stmt = select(PenORM).where(
            PenORM.farm_id == farm_id, func.lower(PenORM.name) == name.strip().lower()
        )
        res = await self.session.execute(stmt)
        orm = res.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list_for_farm(self, farm_id: UUID, *, active: bool | None = None) -> list[Pen]:
        stmt = select(PenORM).where(PenORM.farm_id == farm_id)
        if active is not None:
            stmt = stmt.where(PenORM.active.is_(active))
        stmt = stmt.order_by(PenORM.name)
        res = await self.session.execute(stmt)
        items = res.scalars().all()
        return [self._to_domain(x) for x in items]

    async def update(self, farm_id: UUID, pen_id: UUID, data: dict) -> Pen | None:
        stmt = (
            update(PenORM)
            .where(PenORM.farm_id == farm_id, PenORM.id == pen_id)
            .values(**data, updated_at=func.now())
            .returning(PenORM)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise PersistenceError("Failed to update pen") from exc
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
