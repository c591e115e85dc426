from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class LactationStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"


@dataclass(slots=True)
class Lactation:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    number: int
    start_date: date
    end_date: date | None = None
    status: str = LactationStatus.IN_PROGRESS.value
    calving_id: UUID | None = None
    days_in_milk: int | None = None
    total_production: float | None = None
    daily_average: float | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        number: int,
        start_date: date,
        calving_id: UUID | None = None,
    ) -> Lactation:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            number=number,
            start_date=start_date,
            status=LactationStatus.IN_PROGRESS.value,
            calving_id=calving_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_open(self) -> bool:
        return self.status == LactationStatus.IN_PROGRESS.value

    def close(self, end_date: date, total_production: float | None = None) -> None:
        self.status = LactationStatus.CLOSED.value
        self.end_date = end_date
        self.days_in_milk = (end_date - self.start_date).days
        if total_production is not None:
            self.total_production = total_production
            if self.days_in_milk > 0:
                self.daily_average = round(total_production / self.days_in_milk, 2)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
