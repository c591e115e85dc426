from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, ValidationError
from src.application.events.models import AnimalUpdatedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_animal
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AcquisitionOrigin, AnimalCategory, Sex
from src.domain.value_objects.animal_status import ExitReason, HealthStatus


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    identification: str | None = None
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


# reproductive_status and current_pen_id are owned by the lifecycle use cases
EDITABLE_FIELDS = (
    "identification",
    "breed",
    "birth_date",
    "sex",
    "category",
    "health_status",
    "mother_id",
    "sire_info",
    "birth_weight",
    "entry_date",
    "exit_date",
    "exit_reason",
    "acquisition_origin",
)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: UpdateAnimalInput,
    actor_user_id: UUID | None = None,
) -> Animal:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await load_animal(uow, farm_id, animal_id)

    ensure_choice(payload.sex, Sex, "sex")
    ensure_choice(payload.category, AnimalCategory, "category")
    ensure_choice(payload.health_status, HealthStatus, "health_status")
    ensure_choice(payload.exit_reason, ExitReason, "exit_reason")
    ensure_choice(payload.acquisition_origin, AcquisitionOrigin, "acquisition_origin")

    data: dict = {}
    for field_name in EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing

    if "identification" in data:
        identification = data["identification"].strip()
        if not identification:
            raise ValidationError("identification cannot be empty")
        if identification != existing.identification and (
            await uow.animals.exists_by_identification(identification)
        ):
            raise ConflictError(f"Animal identification '{identification}' already exists")
        data["identification"] = identification

    updated = await uow.animals.update(
        farm_id,
        animal_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating animal")
    uow.add_event(
        AnimalUpdatedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=updated.id,
            identification=updated.identification,
            changed_fields=list(data.keys()),
        )
    )
    await uow.commit()
    return updated
