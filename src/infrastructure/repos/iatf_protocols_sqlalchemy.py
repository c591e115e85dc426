from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.breedings import IatfProtocolsRepository
from src.domain.models.iatf_protocol import IatfProtocol
from src.infrastructure.db.orm.breeding import IatfProtocolORM


class IatfProtocolsSQLAlchemyRepository(IatfProtocolsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: IatfProtocolORM) -> IatfProtocol:
        return IatfProtocol(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            description=orm.description,
            duration_days=orm.duration_days,
            active=orm.active,
            created_at=orm.created_at,
        )

    async def add(self, protocol: IatfProtocol) -> IatfProtocol:
        orm = IatfProtocolORM(
            id=protocol.id,
            farm_id=protocol.farm_id,
            name=protocol.name,
            description=protocol.description,
            duration_days=protocol.duration_days,
            active=protocol.active,
            created_at=protocol.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create IATF protocol") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, protocol_id: UUID) -> IatfProtocol | None:
        stmt = select(IatfProtocolORM).where(
            IatfProtocolORM.farm_id == farm_id, IatfProtocolORM.id == protocol_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID, *, active: bool | None = None) -> list[IatfProtocol]:
        stmt = select(IatfProtocolORM).where(IatfProtocolORM.farm_id == farm_id)
        if active is not None:
            stmt = stmt.where(IatfProtocolORM.active.is_(active))
        stmt = stmt.order_by(IatfProtocolORM.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
