from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.events.models import AnimalMovedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import load_animal
from src.domain.models.pen_movement import PenMovement

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveAnimalInput:
    destination_pen_id: UUID
    reason: str | None = None
    moved_at: datetime | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: MoveAnimalInput,
    actor_user_id: UUID | None = None,
) -> PenMovement:
    """Move an animal to another pen of its farm and log the transfer.

    The origin is whatever pen the animal is in when the call is made, and may
    be empty for animals that were never assigned.
    """
    animal = await load_animal(uow, farm_id, animal_id)

    destination = await uow.pens.get_by_id(payload.destination_pen_id)
    if not destination:
        raise NotFound(f"Pen {payload.destination_pen_id} not found")
    if destination.farm_id != animal.farm_id:
        raise ValidationError(
            "Destination pen belongs to a different farm than the animal",
            details={"pen_id": str(destination.id)},
        )

    movement = PenMovement.create(
        farm_id=animal.farm_id,
        animal_id=animal.id,
        destination_pen_id=destination.id,
        origin_pen_id=animal.current_pen_id,
        moved_at=payload.moved_at,
        reason=payload.reason,
        moved_by=actor_user_id,
    )
    created = await uow.pen_movements.add(movement)
    await uow.animals.set_current_pen(animal.id, destination.id)

    uow.add_event(
        AnimalMovedEvent(
            farm_id=farm_id,
            actor_user_id=actor_user_id,
            animal_id=animal.id,
            destination_pen_id=destination.id,
            origin_pen_id=animal.current_pen_id,
        )
    )
    await uow.commit()
    logger.info("Animal %s moved to pen %s", animal.id, destination.id)
    return created
