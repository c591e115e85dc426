from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class IatfProtocol:
    """Fixed-time artificial insemination protocol used by a farm."""

    id: UUID
    farm_id: UUID
    name: str
    description: str | None = None
    duration_days: int | None = None
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        name: str,
        *,
        description: str | None = None,
        duration_days: int | None = None,
        active: bool = True,
    ) -> IatfProtocol:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            description=description,
            duration_days=duration_days,
            active=active,
            created_at=datetime.now(timezone.utc),
        )
