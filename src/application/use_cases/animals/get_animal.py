from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import load_animal
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> Animal:
    return await load_animal(uow, farm_id, animal_id)
