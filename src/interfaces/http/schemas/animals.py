from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnimalBase(BaseModel):
    identification: str
    breed: str | None = None
    birth_date: date | None = None
    sex: str | None = None
    category: str | None = None
    health_status: str | None = None
    mother_id: UUID | None = None
    sire_info: str | None = None
    birth_weight: float | None = None
    entry_date: date | None = None
    exit_date: date | None = None
    exit_reason: str | None = None
    acquisition_origin: str | None = None

    @field_validator("sex", "category", "health_status", "exit_reason", "acquisition_origin")
    @classmethod
    def normalize_codes(cls, v: str | None) -> str | None:
        return v.strip().upper() if v else v


class AnimalCreate(AnimalBase):
    pass


class AnimalUpdate(BaseModel):
    version: int
    identification: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    sex: str | None = None
    category: str | None = None
    health_status: str | None = None
    mother_id: UUID | None = None
    sire_info: str | None = None
    birth_weight: float | None = None
    entry_date: date | None = None
    exit_date: date | None = None
    exit_reason: str | None = None
    acquisition_origin: str | None = None

    @field_validator("sex", "category", "health_status", "exit_reason", "acquisition_origin")
    @classmethod
    def normalize_codes(cls, v: str | None) -> str | None:
        return v.strip().upper() if v else v


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    identification: str
    breed: str | None
    birth_date: date | None
    sex: str | None
    health_status: str | None
    category: str | None
    reproductive_status: str | None
    mother_id: UUID | None
    sire_info: str | None
    current_pen_id: UUID | None
    birth_weight: float | None
    entry_date: date | None
    exit_date: date | None
    exit_reason: str | None
    acquisition_origin: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class MovePenRequest(BaseModel):
    destination_pen_id: UUID
    reason: str | None = None
    moved_at: datetime | None = None


class PenMovementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    origin_pen_id: UUID | None
    destination_pen_id: UUID
    moved_at: datetime
    reason: str | None
    moved_by: UUID | None


class ReclassifyRequest(BaseModel):
    min_age_months: int | None = Field(
        None, description="Minimum age in months; 12 when omitted or not positive"
    )


class ReclassifyResponse(BaseModel):
    count: int
    animal_ids: list[UUID]
    min_age_months: int
