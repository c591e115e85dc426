from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from src.domain.models.pen import Pen


class PensRepo(ABC):
    @abstractmethod
    async def add(self, pen: Pen) -> Pen: ...

    @abstractmethod
    async def get(self, farm_id: UUID, pen_id: UUID) -> Pen | None: ...

    @abstractmethod
    async def get_by_id(self, pen_id: UUID) -> Pen | None:
        """Unscoped lookup, used to tell a missing pen from a pen of another farm."""

    @abstractmethod
    async def find_by_name(self, farm_id: UUID, name: str) -> Pen | None: ...

    @abstractmethod
    async def list_for_farm(self, farm_id: UUID, *, active: bool | None = None) -> list[Pen]: ...

    @abstractmethod
    async def update(self, farm_id: UUID, pen_id: UUID, data: dict) -> Pen | None: ...
