from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.calving import Calving
from src.domain.models.dry_off import DryOff
from src.domain.models.offspring import Offspring


class CalvingsRepository(Protocol):
    async def add(self, calving: Calving) -> Calving: ...

    async def get(self, farm_id: UUID, calving_id: UUID) -> Calving | None: ...

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Calving]: ...


class OffspringRepository(Protocol):
    async def add(self, offspring: Offspring) -> Offspring: ...

    async def update(self, offspring: Offspring) -> Offspring: ...

    async def count_by_calving(self, calving_id: UUID) -> int: ...

    async def list_by_calving(self, calving_id: UUID) -> list[Offspring]: ...


class DryOffsRepository(Protocol):
    async def add(self, dry_off: DryOff) -> DryOff: ...

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[DryOff]: ...
