from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Estrus
class EstrusCreate(BaseModel):
    animal_id: UUID
    detected_at: dt.datetime | None = None
    detection_method: str | None = None
    intensity: str | None = None
    notes: str | None = None

    @field_validator("detection_method", "intensity")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class EstrusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    detected_at: dt.datetime
    detection_method: str | None
    intensity: str | None
    notes: str | None
    recorded_by: UUID | None


# Breedings
class BreedingCreate(BaseModel):
    animal_id: UUID
    type: str = Field(..., description="AI, IATF, NATURAL or ET")
    date: dt.date
    estrus_id: UUID | None = None
    sire_animal_id: UUID | None = None
    sire_info: str | None = None
    semen_batch: str | None = None
    technician: str | None = None
    protocol_id: UUID | None = None
    notes: str | None = None

    @field_validator("type")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class BreedingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    type: str
    date: dt.date
    estrus_id: UUID | None
    sire_animal_id: UUID | None
    sire_info: str | None
    semen_batch: str | None
    technician: str | None
    protocol_id: UUID | None
    notes: str | None
    created_at: dt.datetime


# Pregnancy diagnoses
class PregnancyDiagnosisCreate(BaseModel):
    animal_id: UUID
    date: dt.date
    result: str = Field(..., description="POSITIVE, NEGATIVE or INCONCLUSIVE")
    breeding_id: UUID | None = None
    estimated_days: int | None = None
    method: str | None = None
    veterinarian: str | None = None
    notes: str | None = None

    @field_validator("result", "method")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class PregnancyDiagnosisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: dt.date
    result: str
    breeding_id: UUID | None
    estimated_days: int | None
    method: str | None
    veterinarian: str | None
    notes: str | None


# Pregnancies
class PregnancyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    breeding_id: UUID
    confirmation_date: dt.date
    due_date: dt.date
    status: str
    notes: str | None
    version: int


class PregnancyDiagnosisResult(BaseModel):
    diagnosis: PregnancyDiagnosisResponse
    pregnancy: PregnancyResponse | None = None


class PregnancyStatusUpdate(BaseModel):
    status: str = Field(..., description="LOSS or ABORTION")
    notes: str | None = None

    @field_validator("status")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


# IATF protocols
class IatfProtocolCreate(BaseModel):
    name: str
    description: str | None = None
    duration_days: int | None = None
    active: bool = True


class IatfProtocolResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    name: str
    description: str | None
    duration_days: int | None
    active: bool
