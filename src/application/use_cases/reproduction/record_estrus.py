from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_female
from src.domain.models.estrus import EstrusDetectionMethod, EstrusEvent, EstrusIntensity


@dataclass(slots=True)
class RecordEstrusInput:
    animal_id: UUID
    detected_at: datetime | None = None
    detection_method: str | None = None
    intensity: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordEstrusInput,
    actor_user_id: UUID | None = None,
) -> EstrusEvent:
    ensure_choice(payload.detection_method, EstrusDetectionMethod, "detection_method")
    ensure_choice(payload.intensity, EstrusIntensity, "intensity")
    animal = await load_female(uow, farm_id, payload.animal_id, "estrus")

    estrus = EstrusEvent.create(
        farm_id=farm_id,
        animal_id=animal.id,
        detected_at=payload.detected_at or datetime.now(timezone.utc),
        detection_method=payload.detection_method,
        intensity=payload.intensity,
        notes=payload.notes,
        recorded_by=actor_user_id,
    )
    created = await uow.estrus.add(estrus)
    await uow.commit()
    return created
