from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError
from src.application.events.models import CalvingRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_female
from src.domain.models.calving import Calving, CalvingType
from src.domain.models.lactation import Lactation
from src.domain.models.pregnancy import Pregnancy
from src.domain.value_objects.animal_status import ReproductiveStatus

logger = logging.getLogger(__name__)

DEFAULT_LACTATION_NUMBER_ATTEMPTS = 3


@dataclass(slots=True)
class RecordCalvingInput:
    animal_id: UUID
    date: date
    pregnancy_id: UUID | None = None
    type: str | None = None
    offspring_count: int | None = None
    complications: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordCalvingOutput:
    calving: Calving
    lactation: Lactation
    pregnancy: Pregnancy | None = None


async def open_next_lactation(
    uow: UnitOfWork,
    calving: Calving,
    *,
    max_attempts: int = DEFAULT_LACTATION_NUMBER_ATTEMPTS,
) -> Lactation:
    """Open lactation number ``count + 1`` for the calving's animal.

    A concurrent calving can take the same number first; the insert is then
    rejected by the unique (animal, number) constraint and the count re-read.
    """
    attempts = max(1, max_attempts)
    for attempt in range(1, attempts + 1):
        number = await uow.lactations.count_by_animal(calving.animal_id) + 1
        try:
            return await uow.lactations.add(
                Lactation.create(
                    farm_id=calving.farm_id,
                    animal_id=calving.animal_id,
                    number=number,
                    start_date=calving.date,
                    calving_id=calving.id,
                )
            )
        except ConflictError:
            logger.warning(
                "Lactation number %s taken for animal %s (attempt %s/%s)",
                number,
                calving.animal_id,
                attempt,
                attempts,
            )
    raise ConflictError(
        "Could not assign a lactation number; concurrent calvings for the same animal",
        details={"animal_id": str(calving.animal_id)},
    )


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordCalvingInput,
    actor_user_id: UUID | None = None,
    *,
    lactation_number_attempts: int = DEFAULT_LACTATION_NUMBER_ATTEMPTS,
) -> RecordCalvingOutput:
    """Record a calving and apply its cascade in one transaction.

    Order of writes: the calving itself, the animal's reproductive status,
    delivery of the linked pregnancy (when it resolves to this animal), and a
    new lactation. Any failure rolls all of them back.
    """
    ensure_choice(payload.type, CalvingType, "type")
    animal = await load_female(uow, farm_id, payload.animal_id, "a calving")

    pregnancy = None
    if payload.pregnancy_id:
        pregnancy = await uow.pregnancies.get(farm_id, payload.pregnancy_id)
        if pregnancy and pregnancy.animal_id != animal.id:
            pregnancy = None
        if pregnancy is None:
            logger.warning(
                "Calving for animal %s references unknown pregnancy %s; left unlinked",
                animal.id,
                payload.pregnancy_id,
            )

    calving = await uow.calvings.add(
        Calving.create(
            farm_id=farm_id,
            animal_id=animal.id,
            date=payload.date,
            offspring_count=payload.offspring_count,
            pregnancy_id=payload.pregnancy_id,
            type=payload.type,
            complications=payload.complications,
            notes=payload.notes,
        )
    )
    await uow.animals.set_reproductive_status(animal.id, ReproductiveStatus.CALVED.value)

    if pregnancy is not None:
        pregnancy.mark_delivered()
        pregnancy = await uow.pregnancies.update(pregnancy)

    lactation = await open_next_lactation(uow, calving, max_attempts=lactation_number_attempts)

    uow.add_event(
        CalvingRecordedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=animal.id,
            calving_id=calving.id,
            lactation_id=lactation.id,
            lactation_number=lactation.number,
            pregnancy_id=pregnancy.id if pregnancy else None,
        )
    )
    await uow.commit()
    return RecordCalvingOutput(calving=calving, lactation=lactation, pregnancy=pregnancy)
