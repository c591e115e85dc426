from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.animal_category import AnimalCategory, Sex


@dataclass(slots=True)
class Animal:
    id: UUID
    farm_id: UUID
    identification: str
    breed: str | None = None
    birth_date: date | None = None
    sex: str | None = None
    health_status: str | None = None
    category: str | None = None
    # Snapshot of the latest lifecycle event; written only by lifecycle use cases
    reproductive_status: str | None = None
    mother_id: UUID | None = None
    sire_info: str | None = None
    current_pen_id: UUID | None = None
    birth_weight: float | None = None
    entry_date: date | None = None
    exit_date: date | None = None
    exit_reason: str | None = None
    acquisition_origin: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        identification: str,
        breed: str | None = None,
        birth_date: date | None = None,
        sex: str | None = None,
        health_status: str | None = None,
        category: str | None = None,
        mother_id: UUID | None = None,
        sire_info: str | None = None,
        birth_weight: float | None = None,
        entry_date: date | None = None,
        exit_date: date | None = None,
        exit_reason: str | None = None,
        acquisition_origin: str | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            identification=identification,
            breed=breed,
            birth_date=birth_date,
            sex=sex,
            health_status=health_status,
            category=category,
            mother_id=mother_id,
            sire_info=sire_info,
            birth_weight=birth_weight,
            entry_date=entry_date,
            exit_date=exit_date,
            exit_reason=exit_reason,
            acquisition_origin=acquisition_origin,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_female(self) -> bool:
        return self.sex == Sex.FEMALE.value

    @property
    def is_male(self) -> bool:
        return self.sex == Sex.MALE.value

    @property
    def is_female_calf(self) -> bool:
        return self.category == AnimalCategory.FEMALE_CALF.value

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
