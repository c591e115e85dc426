from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.breeding import Breeding
from src.domain.models.estrus import EstrusEvent
from src.domain.models.iatf_protocol import IatfProtocol


class EstrusRepository(Protocol):
    async def add(self, estrus: EstrusEvent) -> EstrusEvent: ...

    async def get(self, farm_id: UUID, estrus_id: UUID) -> EstrusEvent | None: ...

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[EstrusEvent]: ...


class BreedingsRepository(Protocol):
    async def add(self, breeding: Breeding) -> Breeding: ...

    async def get(self, farm_id: UUID, breeding_id: UUID) -> Breeding | None: ...

    async def list(self, farm_id: UUID, *, animal_id: UUID | None = None) -> list[Breeding]: ...


class IatfProtocolsRepository(Protocol):
    async def add(self, protocol: IatfProtocol) -> IatfProtocol: ...

    async def get(self, farm_id: UUID, protocol_id: UUID) -> IatfProtocol | None: ...

    async def list(self, farm_id: UUID, *, active: bool | None = None) -> list[IatfProtocol]: ...
