from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.lactation import Lactation


class LactationsRepository(Protocol):
    async def add(self, lactation: Lactation) -> Lactation:
        """Insert a lactation; raises ConflictError if its number is already taken."""
        ...

    async def get(self, farm_id: UUID, lactation_id: UUID) -> Lactation | None: ...

    async def count_by_animal(self, animal_id: UUID) -> int: ...

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Lactation]: ...

    async def update(self, lactation: Lactation) -> Lactation: ...
