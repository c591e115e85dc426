from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4


class BreedingType(str, Enum):
    AI = "AI"
    IATF = "IATF"
    NATURAL = "NATURAL"
    ET = "ET"


GESTATION_DAYS = 283


def expected_calving_date(breeding_date: date) -> date:
    """Due date for a pregnancy conceived on ``breeding_date``."""
    return breeding_date + timedelta(days=GESTATION_DAYS)


@dataclass(slots=True)
class Breeding:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    type: str
    date: date

    estrus_id: UUID | None = None
    sire_animal_id: UUID | None = None
    sire_info: str | None = None
    semen_batch: str | None = None
    technician: str | None = None
    protocol_id: UUID | None = None
    notes: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        type: str,
        date: date,
        estrus_id: UUID | None = None,
        sire_animal_id: UUID | None = None,
        sire_info: str | None = None,
        semen_batch: str | None = None,
        technician: str | None = None,
        protocol_id: UUID | None = None,
        notes: str | None = None,
    ) -> Breeding:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            type=type,
            date=date,
            estrus_id=estrus_id,
            sire_animal_id=sire_animal_id,
            sire_info=sire_info,
            semen_batch=semen_batch,
            technician=technician,
            protocol_id=protocol_id,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
