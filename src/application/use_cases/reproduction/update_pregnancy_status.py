from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.events.models import PregnancyEndedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pregnancy import Pregnancy, PregnancyStatus

# DELIVERED is only reachable through a calving
MANUAL_END_STATUSES = (PregnancyStatus.LOSS.value, PregnancyStatus.ABORTION.value)


@dataclass(slots=True)
class UpdatePregnancyStatusInput:
    status: str
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    pregnancy_id: UUID,
    payload: UpdatePregnancyStatusInput,
    actor_user_id: UUID | None = None,
) -> Pregnancy:
    if payload.status == PregnancyStatus.DELIVERED.value:
        raise ValidationError("A pregnancy can only be delivered by recording a calving")
    if payload.status not in MANUAL_END_STATUSES:
        raise ValidationError(
            f"Invalid status. Must be one of: {', '.join(MANUAL_END_STATUSES)}"
        )

    pregnancy = await uow.pregnancies.get(farm_id, pregnancy_id)
    if not pregnancy:
        raise NotFound(f"Pregnancy {pregnancy_id} not found")
    if pregnancy.status != PregnancyStatus.CONFIRMED.value:
        raise ValidationError(
            f"Pregnancy is already {pregnancy.status}",
            details={"status": pregnancy.status},
        )

    pregnancy.mark_lost(payload.status, payload.notes)
    updated = await uow.pregnancies.update(pregnancy)
    uow.add_event(
        PregnancyEndedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=updated.animal_id,
            pregnancy_id=updated.id,
            status=updated.status,
        )
    )
    await uow.commit()
    return updated
