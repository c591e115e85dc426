from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.calving import Calving
from src.domain.models.dry_off import DryOff
from src.domain.models.lactation import Lactation
from src.domain.models.offspring import Offspring


async def list_calvings(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[Calving]:
    return await uow.calvings.list(farm_id, animal_id=animal_id)


async def list_offspring(uow: UnitOfWork, farm_id: UUID, calving_id: UUID) -> list[Offspring]:
    calving = await uow.calvings.get(farm_id, calving_id)
    if not calving:
        raise NotFound(f"Calving {calving_id} not found")
    return await uow.offspring.list_by_calving(calving.id)


async def list_lactations(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[Lactation]:
    return await uow.lactations.list(farm_id, animal_id=animal_id)


async def list_dry_offs(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[DryOff]:
    return await uow.dry_offs.list(farm_id, animal_id=animal_id)
