from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice
from src.domain.models.pen import Pen, PenType


@dataclass(slots=True)
class UpdatePenInput:
    name: str | None = None
    type: str | None = None
    description: str | None = None
    active: bool | None = None


async def execute(uow: UnitOfWork, farm_id: UUID, pen_id: UUID, payload: UpdatePenInput) -> Pen:
    existing = await uow.pens.get(farm_id, pen_id)
    if not existing:
        raise NotFound("Pen not found")
    ensure_choice(payload.type, PenType, "type")

    updates: dict = {}
    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise ValidationError("Pen name cannot be empty")
        clash = await uow.pens.find_by_name(farm_id, name)
        if clash and clash.id != pen_id:
            raise ConflictError("Pen name already exists for farm")
        updates["name"] = name
    if payload.type is not None:
        updates["type"] = payload.type
    if payload.description is not None:
        updates["description"] = payload.description
    if payload.active is not None:
        updates["active"] = payload.active
    if not updates:
        return existing

    updated = await uow.pens.update(farm_id, pen_id, updates)
    if not updated:
        raise NotFound("Pen not found")
    await uow.commit()
    return updated
