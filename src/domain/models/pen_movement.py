from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class PenMovement:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    destination_pen_id: UUID
    moved_at: datetime
    origin_pen_id: UUID | None = None
    reason: str | None = None
    moved_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        destination_pen_id: UUID,
        origin_pen_id: UUID | None = None,
        moved_at: datetime | None = None,
        reason: str | None = None,
        moved_by: UUID | None = None,
    ) -> PenMovement:
        now = datetime.now(timezone.utc)
        if moved_at is None:
            moved_at = now
        elif moved_at.tzinfo is None:
            moved_at = moved_at.replace(tzinfo=timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            destination_pen_id=destination_pen_id,
            origin_pen_id=origin_pen_id,
            moved_at=moved_at,
            reason=reason,
            moved_by=moved_by,
            created_at=now,
        )
