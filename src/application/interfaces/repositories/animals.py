from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def get_by_id(self, animal_id: UUID) -> Animal | None: ...

    async def exists_by_identification(self, identification: str) -> bool: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        category: str | None = None,
        reproductive_status: str | None = None,
        pen_id: UUID | None = None,
        search: str | None = None,
    ) -> list[Animal]: ...

    async def update(
        self,
        farm_id: UUID,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None: ...

    # Narrow mutations reserved for lifecycle use cases
    async def set_reproductive_status(self, animal_id: UUID, status: str | None) -> None: ...

    async def set_current_pen(self, animal_id: UUID, pen_id: UUID | None) -> None: ...

    async def set_category(self, animal_id: UUID, category: str) -> None: ...

    async def list_female_calves_born_on_or_before(
        self, cutoff: date, *, farm_id: UUID | None = None
    ) -> list[Animal]: ...
