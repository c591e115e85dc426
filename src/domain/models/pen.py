from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class PenType(str, Enum):
    LACTATING = "LACTATING"
    DRY = "DRY"
    MATERNITY = "MATERNITY"
    PRE_CALVING = "PRE_CALVING"
    CALVES = "CALVES"
    REARING = "REARING"
    FATTENING = "FATTENING"


@dataclass(slots=True)
class Pen:
    id: UUID
    farm_id: UUID
    name: str
    type: str | None = None
    description: str | None = None
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        name: str,
        *,
        type: str | None = None,
        description: str | None = None,
        active: bool = True,
    ) -> Pen:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            type=type,
            description=description,
            active=active,
            created_at=now,
            updated_at=now,
        )
