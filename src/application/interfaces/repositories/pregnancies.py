from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.pregnancy import Pregnancy
from src.domain.models.pregnancy_diagnosis import PregnancyDiagnosis


class PregnancyDiagnosesRepository(Protocol):
    async def add(self, diagnosis: PregnancyDiagnosis) -> PregnancyDiagnosis: ...

    async def list(
        self, farm_id: UUID, *, animal_id: UUID | None = None
    ) -> list[PregnancyDiagnosis]: ...


class PregnanciesRepository(Protocol):
    async def add(self, pregnancy: Pregnancy) -> Pregnancy: ...

    async def get(self, farm_id: UUID, pregnancy_id: UUID) -> Pregnancy | None: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        status: str | None = None,
    ) -> list[Pregnancy]: ...

    async def update(self, pregnancy: Pregnancy) -> Pregnancy: ...
