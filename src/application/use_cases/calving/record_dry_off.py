from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.events.models import DryOffRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_female
from src.domain.models.dry_off import DryOff, DryOffReason
from src.domain.value_objects.animal_status import ReproductiveStatus


@dataclass(slots=True)
class RecordDryOffInput:
    animal_id: UUID
    date: date
    pregnancy_id: UUID | None = None
    expected_calving_date: date | None = None
    protocol: str | None = None
    reason: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordDryOffInput,
    actor_user_id: UUID | None = None,
) -> DryOff:
    # The open lactation is left as is; it is closed explicitly.
    ensure_choice(payload.reason, DryOffReason, "reason")
    animal = await load_female(uow, farm_id, payload.animal_id, "a dry-off")

    expected_calving_date = payload.expected_calving_date
    if expected_calving_date is None and payload.pregnancy_id:
        pregnancy = await uow.pregnancies.get(farm_id, payload.pregnancy_id)
        if pregnancy and pregnancy.animal_id == animal.id:
            expected_calving_date = pregnancy.due_date

    created = await uow.dry_offs.add(
        DryOff.create(
            farm_id=farm_id,
            animal_id=animal.id,
            date=payload.date,
            pregnancy_id=payload.pregnancy_id,
            expected_calving_date=expected_calving_date,
            protocol=payload.protocol,
            reason=payload.reason,
            notes=payload.notes,
        )
    )
    await uow.animals.set_reproductive_status(animal.id, ReproductiveStatus.DRY.value)
    uow.add_event(
        DryOffRecordedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=animal.id,
            dry_off_id=created.id,
        )
    )
    await uow.commit()
    return created
