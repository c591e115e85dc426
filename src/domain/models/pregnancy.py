from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.models.breeding import expected_calving_date


class PregnancyStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    LOSS = "LOSS"
    ABORTION = "ABORTION"
    DELIVERED = "DELIVERED"


@dataclass(slots=True)
class Pregnancy:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    breeding_id: UUID
    confirmation_date: date
    # Fixed at creation; never recomputed
    due_date: date
    status: str = PregnancyStatus.CONFIRMED.value
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def confirm(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        breeding_id: UUID,
        breeding_date: date,
        confirmation_date: date,
        notes: str | None = None,
    ) -> Pregnancy:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            breeding_id=breeding_id,
            confirmation_date=confirmation_date,
            due_date=expected_calving_date(breeding_date),
            status=PregnancyStatus.CONFIRMED.value,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def mark_delivered(self) -> None:
        self.status = PregnancyStatus.DELIVERED.value
        self.bump_version()

    def mark_lost(self, status: str, notes: str | None = None) -> None:
        self.status = status
        if notes is not None:
            self.notes = notes
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
