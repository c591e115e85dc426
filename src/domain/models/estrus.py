from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class EstrusDetectionMethod(str, Enum):
    VISUAL = "VISUAL"
    PEDOMETER = "PEDOMETER"
    TEASER = "TEASER"
    OTHER = "OTHER"


class EstrusIntensity(str, Enum):
    WEAK = "WEAK"
    MODERATE = "MODERATE"
    STRONG = "STRONG"


@dataclass(slots=True)
class EstrusEvent:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    detected_at: datetime
    detection_method: str | None = None
    intensity: str | None = None
    notes: str | None = None
    recorded_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        detected_at: datetime,
        detection_method: str | None = None,
        intensity: str | None = None,
        notes: str | None = None,
        recorded_by: UUID | None = None,
    ) -> EstrusEvent:
        if detected_at.tzinfo is None:
            detected_at = detected_at.replace(tzinfo=timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            detected_at=detected_at,
            detection_method=detection_method,
            intensity=intensity,
            notes=notes,
            recorded_by=recorded_by,
            created_at=datetime.now(timezone.utc),
        )
