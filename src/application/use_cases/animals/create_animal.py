from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, ValidationError
from src.application.events.models import AnimalCreatedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AcquisitionOrigin, AnimalCategory, Sex
from src.domain.value_objects.animal_status import ExitReason, HealthStatus


@dataclass(slots=True)
class CreateAnimalInput:
    identification: str
    breed: str | None = None
    birth_date: date | None = None
    sex: str | None = None
    category: str | None = None
    health_status: str | None = None
    mother_id: UUID | None = None
    sire_info: str | None = None
    birth_weight: float | None = None
    entry_date: date | None = None
    exit_date: date | None = None
    exit_reason: str | None = None
    acquisition_origin: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: CreateAnimalInput,
    actor_user_id: UUID | None = None,
) -> Animal:
    identification = (payload.identification or "").strip()
    if not identification:
        raise ValidationError("identification is required")

    ensure_choice(payload.sex, Sex, "sex")
    ensure_choice(payload.category, AnimalCategory, "category")
    ensure_choice(payload.exit_reason, ExitReason, "exit_reason")

    origin = payload.acquisition_origin or AcquisitionOrigin.BORN.value
    ensure_choice(origin, AcquisitionOrigin, "acquisition_origin")
    if origin == AcquisitionOrigin.BORN.value and payload.birth_date is None:
        raise ValidationError("birth_date is required for animals born on the farm")

    health_status = payload.health_status or HealthStatus.HEALTHY.value
    ensure_choice(health_status, HealthStatus, "health_status")

    if payload.birth_weight is not None and payload.birth_weight <= 0:
        raise ValidationError("birth_weight must be positive")

    if await uow.animals.exists_by_identification(identification):
        raise ConflictError(f"Animal identification '{identification}' already exists")

    animal = Animal.create(
        farm_id=farm_id,
        identification=identification,
        breed=payload.breed,
        birth_date=payload.birth_date,
        sex=payload.sex,
        health_status=health_status,
        category=payload.category,
        mother_id=payload.mother_id,
        sire_info=payload.sire_info,
        birth_weight=payload.birth_weight,
        entry_date=payload.entry_date,
        exit_date=payload.exit_date,
        exit_reason=payload.exit_reason,
        acquisition_origin=origin,
    )
    created = await uow.animals.add(animal)
    uow.add_event(
        AnimalCreatedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=created.id,
            identification=created.identification,
        )
    )
    await uow.commit()
    return created
