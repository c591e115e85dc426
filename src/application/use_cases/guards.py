from __future__ import annotations

from enum import Enum
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


def ensure_choice(value: str | None, choices: type[Enum], field_name: str) -> None:
    """Reject values outside ``choices``; ``None`` means the field was omitted."""
    if value is None:
        return
    valid = [c.value for c in choices]
    if value not in valid:
        raise ValidationError(
            f"Invalid {field_name}. Must be one of: {', '.join(valid)}",
            details={"field": field_name, "value": value},
        )


async def load_animal(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(farm_id, animal_id)
    if not animal:
        raise NotFound(f"Animal {animal_id} not found")
    return animal


async def load_female(uow: UnitOfWork, farm_id: UUID, animal_id: UUID, action: str) -> Animal:
    animal = await load_animal(uow, farm_id, animal_id)
    if not animal.is_female:
        raise ValidationError(
            f"Cannot record {action} for a non-female animal",
            details={"animal_id": str(animal_id), "sex": animal.sex},
        )
    return animal
