from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class AnimalCreatedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    identification: str


@dataclass(frozen=True)
class AnimalUpdatedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    identification: str
    changed_fields: list[str] | None = None


@dataclass(frozen=True)
class BreedingRecordedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    breeding_id: UUID
    type: str


@dataclass(frozen=True)
class PregnancyConfirmedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    pregnancy_id: UUID
    due_date: date


@dataclass(frozen=True)
class PregnancyEndedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    pregnancy_id: UUID
    status: str


@dataclass(frozen=True)
class CalvingRecordedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    calving_id: UUID
    lactation_id: UUID
    lactation_number: int
    pregnancy_id: UUID | None = None


@dataclass(frozen=True)
class CalfRegisteredEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    calving_id: UUID
    mother_id: UUID
    animal_id: UUID
    identification: str


@dataclass(frozen=True)
class DryOffRecordedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    dry_off_id: UUID


@dataclass(frozen=True)
class AnimalMovedEvent:
    farm_id: UUID
    actor_user_id: UUID | None
    animal_id: UUID
    destination_pen_id: UUID
    origin_pen_id: UUID | None = None


@dataclass(frozen=True)
class AnimalsReclassifiedEvent:
    farm_id: UUID | None
    animal_ids: tuple[UUID, ...]
    min_age_months: int
