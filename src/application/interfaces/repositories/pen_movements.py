from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.pen_movement import PenMovement


class PenMovementsRepository(Protocol):
    async def add(self, movement: PenMovement) -> PenMovement: ...

    async def list_by_animal(self, farm_id: UUID, animal_id: UUID) -> list[PenMovement]: ...
