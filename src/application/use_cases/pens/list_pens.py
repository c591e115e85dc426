from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pen import Pen


async def execute(uow: UnitOfWork, farm_id: UUID, *, active: bool | None = None) -> list[Pen]:
    return await uow.pens.list_for_farm(farm_id, active=active)
