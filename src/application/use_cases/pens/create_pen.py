from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.pen import Pen, PenType


@dataclass(slots=True)
class CreatePenInput:
    name: str
    type: str | None = None
    description: str | None = None
    active: bool = True


async def execute(uow: UnitOfWork, farm_id: UUID, payload: CreatePenInput) -> Pen:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Pen name is required")
    ensure_choice(payload.type, PenType, "type")
    # Enforce unique name per farm (case-insensitive)
    if await uow.pens.find_by_name(farm_id, name):
        raise ConflictError("Pen name already exists for farm")
    pen = Pen.create(
        farm_id=farm_id,
        name=name,
        type=payload.type,
        description=payload.description,
        active=payload.active,
    )
    created = await uow.pens.add(pen)
    await uow.commit()
    return created
