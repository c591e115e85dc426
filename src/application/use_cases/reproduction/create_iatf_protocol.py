from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.iatf_protocol import IatfProtocol


@dataclass(slots=True)
class CreateIatfProtocolInput:
    name: str
    description: str | None = None
    duration_days: int | None = None
    active: bool = True


async def execute(
    uow: UnitOfWork, farm_id: UUID, payload: CreateIatfProtocolInput
) -> IatfProtocol:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Protocol name is required")
    if payload.duration_days is not None and payload.duration_days < 0:
        raise ValidationError("duration_days cannot be negative")
    protocol = IatfProtocol.create(
        farm_id,
        name,
        description=payload.description,
        duration_days=payload.duration_days,
        active=payload.active,
    )
    created = await uow.iatf_protocols.add(protocol)
    await uow.commit()
    return created
