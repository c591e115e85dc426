from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class DiagnosisResult(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    INCONCLUSIVE = "INCONCLUSIVE"


class DiagnosisMethod(str, Enum):
    PALPATION = "PALPATION"
    ULTRASOUND = "ULTRASOUND"


@dataclass(slots=True)
class PregnancyDiagnosis:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: date
    result: str
    breeding_id: UUID | None = None
    estimated_days: int | None = None
    method: str | None = None
    veterinarian: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        date: date,
        result: str,
        breeding_id: UUID | None = None,
        estimated_days: int | None = None,
        method: str | None = None,
        veterinarian: str | None = None,
        notes: str | None = None,
    ) -> PregnancyDiagnosis:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            date=date,
            result=result,
            breeding_id=breeding_id,
            estimated_days=estimated_days,
            method=method,
            veterinarian=veterinarian,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_positive(self) -> bool:
        return self.result == DiagnosisResult.POSITIVE.value
