from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import load_animal
from src.domain.models.pen_movement import PenMovement


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> list[PenMovement]:
    await load_animal(uow, farm_id, animal_id)
    return await uow.pen_movements.list_by_animal(farm_id, animal_id)
