from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class CalvingType(str, Enum):
    NORMAL = "NORMAL"
    DYSTOCIC = "DYSTOCIC"
    CESAREAN = "CESAREAN"


@dataclass(slots=True)
class Calving:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: date
    offspring_count: int = 1
    pregnancy_id: UUID | None = None
    type: str | None = None
    complications: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        date: date,
        offspring_count: int | None = None,
        pregnancy_id: UUID | None = None,
        type: str | None = None,
        complications: str | None = None,
        notes: str | None = None,
    ) -> Calving:
        if offspring_count is None or offspring_count < 1:
            offspring_count = 1
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            date=date,
            offspring_count=offspring_count,
            pregnancy_id=pregnancy_id,
            type=type,
            complications=complications,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
