from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class DryOffReason(str, Enum):
    PREGNANCY = "PREGNANCY"
    LOW_PRODUCTION = "LOW_PRODUCTION"
    TREATMENT = "TREATMENT"


@dataclass(slots=True)
class DryOff:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: date
    pregnancy_id: UUID | None = None
    expected_calving_date: date | None = None
    protocol: str | None = None
    reason: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        date: date,
        pregnancy_id: UUID | None = None,
        expected_calving_date: date | None = None,
        protocol: str | None = None,
        reason: str | None = None,
        notes: str | None = None,
    ) -> DryOff:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            date=date,
            pregnancy_id=pregnancy_id,
            expected_calving_date=expected_calving_date,
            protocol=protocol,
            reason=reason,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
