from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.events.models import BreedingRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_female
from src.domain.models.animal import Animal
from src.domain.models.breeding import Breeding, BreedingType
from src.domain.value_objects.animal_category import SIRE_CATEGORIES
from src.domain.value_objects.animal_status import ReproductiveStatus


@dataclass(slots=True)
class RecordBreedingInput:
    animal_id: UUID
    type: str
    date: date
    estrus_id: UUID | None = None
    sire_animal_id: UUID | None = None
    sire_info: str | None = None
    semen_batch: str | None = None
    technician: str | None = None
    protocol_id: UUID | None = None
    notes: str | None = None


async def _load_sire(uow: UnitOfWork, farm_id: UUID, sire_id: UUID) -> Animal:
    sire = await uow.animals.get_by_id(sire_id)
    if not sire:
        raise NotFound(f"Sire {sire_id} not found")
    if sire.farm_id != farm_id:
        raise ValidationError(
            "Sire belongs to a different farm", details={"sire_id": str(sire_id)}
        )
    if not sire.is_male:
        raise ValidationError("Sire must be a male animal", details={"sire_id": str(sire_id)})
    if sire.category not in SIRE_CATEGORIES:
        raise ValidationError(
            f"Sire category must be one of: {', '.join(sorted(SIRE_CATEGORIES))}",
            details={"sire_id": str(sire_id), "category": sire.category},
        )
    return sire


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordBreedingInput,
    actor_user_id: UUID | None = None,
) -> Breeding:
    if payload.type is None:
        raise ValidationError("Breeding type is required")
    ensure_choice(payload.type, BreedingType, "type")

    animal = await load_female(uow, farm_id, payload.animal_id, "a breeding")

    sire_info = payload.sire_info.strip() if payload.sire_info else None
    if payload.type == BreedingType.NATURAL.value and not (payload.sire_animal_id or sire_info):
        raise ValidationError("Sire required for natural breeding")
    if payload.sire_animal_id:
        await _load_sire(uow, farm_id, payload.sire_animal_id)

    if payload.estrus_id:
        estrus = await uow.estrus.get(farm_id, payload.estrus_id)
        if not estrus or estrus.animal_id != animal.id:
            raise NotFound(f"Estrus {payload.estrus_id} not found for animal")
    if payload.protocol_id:
        protocol = await uow.iatf_protocols.get(farm_id, payload.protocol_id)
        if not protocol:
            raise NotFound(f"IATF protocol {payload.protocol_id} not found")

    breeding = Breeding.create(
        farm_id=farm_id,
        animal_id=animal.id,
        type=payload.type,
        date=payload.date,
        estrus_id=payload.estrus_id,
        sire_animal_id=payload.sire_animal_id,
        sire_info=sire_info,
        semen_batch=payload.semen_batch,
        technician=payload.technician,
        protocol_id=payload.protocol_id,
        notes=payload.notes,
    )
    created = await uow.breedings.add(breeding)
    await uow.animals.set_reproductive_status(animal.id, ReproductiveStatus.SERVED.value)

    uow.add_event(
        BreedingRecordedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=animal.id,
            breeding_id=created.id,
            type=created.type,
        )
    )
    await uow.commit()
    return created
