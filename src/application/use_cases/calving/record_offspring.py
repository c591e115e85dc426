from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.events.models import CalfRegisteredEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.animal import Animal
from src.domain.models.calving import Calving
from src.domain.models.offspring import Offspring, OffspringCondition, calf_identification
from src.domain.value_objects.animal_category import AcquisitionOrigin, Sex, calf_category_for
from src.domain.value_objects.animal_status import HealthStatus


@dataclass(slots=True)
class RecordOffspringInput:
    sex: str
    condition: str
    weight: float | None = None
    notes: str | None = None
    animal_id: UUID | None = None


async def _register_calf(uow: UnitOfWork, calving: Calving, offspring: Offspring) -> Animal:
    # 0-based position of this offspring among the ones of the calving
    index = max(await uow.offspring.count_by_calving(calving.id) - 1, 0)
    calf = Animal.create(
        farm_id=calving.farm_id,
        identification=calf_identification(calving.id, index),
        birth_date=calving.date,
        sex=offspring.sex,
        health_status=HealthStatus.HEALTHY.value,
        category=calf_category_for(offspring.sex),
        mother_id=calving.animal_id,
        birth_weight=offspring.weight,
        acquisition_origin=AcquisitionOrigin.BORN.value,
    )
    return await uow.animals.add(calf)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    calving_id: UUID,
    payload: RecordOffspringInput,
    actor_user_id: UUID | None = None,
) -> Offspring:
    if payload.sex is None or payload.condition is None:
        raise ValidationError("sex and condition are required")
    ensure_choice(payload.sex, Sex, "sex")
    ensure_choice(payload.condition, OffspringCondition, "condition")
    if payload.weight is not None and payload.weight < 0:
        raise ValidationError("weight cannot be negative")

    calving = await uow.calvings.get(farm_id, calving_id)
    if not calving:
        raise NotFound(f"Calving {calving_id} not found")
    if payload.animal_id:
        linked = await uow.animals.get(farm_id, payload.animal_id)
        if not linked:
            raise NotFound(f"Animal {payload.animal_id} not found")

    offspring = await uow.offspring.add(
        Offspring.create(
            calving_id=calving.id,
            sex=payload.sex,
            condition=payload.condition,
            animal_id=payload.animal_id,
            weight=payload.weight,
            notes=payload.notes,
        )
    )

    if offspring.needs_calf_record:
        calf = await _register_calf(uow, calving, offspring)
        offspring.animal_id = calf.id
        offspring = await uow.offspring.update(offspring)
        uow.add_event(
            CalfRegisteredEvent(
                farm_id=calving.farm_id,
                actor_user_id=actor_user_id,
                calving_id=calving.id,
                mother_id=calving.animal_id,
                animal_id=calf.id,
                identification=calf.identification,
            )
        )

    await uow.commit()
    return offspring
