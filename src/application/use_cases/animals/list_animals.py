from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AnimalCategory
from src.domain.value_objects.animal_status import ReproductiveStatus


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    category: str | None = None,
    reproductive_status: str | None = None,
    pen_id: UUID | None = None,
    search: str | None = None,
) -> list[Animal]:
    ensure_choice(category, AnimalCategory, "category")
    ensure_choice(reproductive_status, ReproductiveStatus, "reproductive_status")
    return await uow.animals.list(
        farm_id,
        category=category,
        reproductive_status=reproductive_status,
        pen_id=pen_id,
        search=search,
    )
