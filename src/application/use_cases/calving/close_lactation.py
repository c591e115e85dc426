from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.lactation import Lactation


@dataclass(slots=True)
class CloseLactationInput:
    end_date: date
    total_production: float | None = None


async def execute(
    uow: UnitOfWork, farm_id: UUID, lactation_id: UUID, payload: CloseLactationInput
) -> Lactation:
    lactation = await uow.lactations.get(farm_id, lactation_id)
    if not lactation:
        raise NotFound(f"Lactation {lactation_id} not found")
    if not lactation.is_open:
        raise ValidationError("Lactation is already closed")
    if payload.end_date < lactation.start_date:
        raise ValidationError("end_date cannot be before the lactation start date")
    if payload.total_production is not None and payload.total_production < 0:
        raise ValidationError("total_production cannot be negative")

    lactation.close(payload.end_date, payload.total_production)
    updated = await uow.lactations.update(lactation)
    await uow.commit()
    return updated
