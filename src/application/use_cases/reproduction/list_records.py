from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.breeding import Breeding
from src.domain.models.estrus import EstrusEvent
from src.domain.models.iatf_protocol import IatfProtocol
from src.domain.models.pregnancy import Pregnancy, PregnancyStatus
from src.domain.models.pregnancy_diagnosis import PregnancyDiagnosis


async def list_estrus(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[EstrusEvent]:
    return await uow.estrus.list(farm_id, animal_id=animal_id)


async def list_breedings(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[Breeding]:
    return await uow.breedings.list(farm_id, animal_id=animal_id)


async def list_diagnoses(
    uow: UnitOfWork, farm_id: UUID, *, animal_id: UUID | None = None
) -> list[PregnancyDiagnosis]:
    return await uow.pregnancy_diagnoses.list(farm_id, animal_id=animal_id)


async def list_pregnancies(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    animal_id: UUID | None = None,
    status: str | None = None,
) -> list[Pregnancy]:
    ensure_choice(status, PregnancyStatus, "status")
    return await uow.pregnancies.list(farm_id, animal_id=animal_id, status=status)


async def list_iatf_protocols(
    uow: UnitOfWork, farm_id: UUID, *, active: bool | None = None
) -> list[IatfProtocol]:
    return await uow.iatf_protocols.list(farm_id, active=active)
