from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class OffspringCondition(str, Enum):
    ALIVE = "ALIVE"
    STILLBORN = "STILLBORN"


def calf_identification(calving_id: UUID, index: int) -> str:
    """Identification for a calf registered automatically from a calving.

    ``index`` is the 0-based position of the offspring among the ones
    recorded for that calving.
    """
    return f"B-{calving_id}-{index}"


@dataclass(slots=True)
class Offspring:
    id: UUID
    calving_id: UUID
    sex: str
    condition: str
    animal_id: UUID | None = None
    weight: float | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        calving_id: UUID,
        sex: str,
        condition: str,
        animal_id: UUID | None = None,
        weight: float | None = None,
        notes: str | None = None,
    ) -> Offspring:
        return cls(
            id=uuid4(),
            calving_id=calving_id,
            sex=sex,
            condition=condition,
            animal_id=animal_id,
            weight=weight,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def needs_calf_record(self) -> bool:
        return self.condition == OffspringCondition.ALIVE.value and self.animal_id is None
