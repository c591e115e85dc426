from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.interfaces.http.schemas.reproduction import PregnancyResponse


class CalvingCreate(BaseModel):
    animal_id: UUID
    date: dt.date
    pregnancy_id: UUID | None = None
    type: str | None = None
    offspring_count: int | None = None
    complications: str | None = None
    notes: str | None = None

    @field_validator("type")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class CalvingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: dt.date
    offspring_count: int
    pregnancy_id: UUID | None
    type: str | None
    complications: str | None
    notes: str | None
    created_at: dt.datetime


class LactationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    number: int
    start_date: dt.date
    end_date: dt.date | None
    status: str
    calving_id: UUID | None
    days_in_milk: int | None
    total_production: float | None
    daily_average: float | None
    version: int


class CalvingResult(BaseModel):
    calving: CalvingResponse
    lactation: LactationResponse
    pregnancy: PregnancyResponse | None = None


class OffspringCreate(BaseModel):
    sex: str
    condition: str
    weight: float | None = None
    notes: str | None = None
    animal_id: UUID | None = None

    @field_validator("sex", "condition")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class OffspringResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    calving_id: UUID
    sex: str
    condition: str
    animal_id: UUID | None
    weight: float | None
    notes: str | None


class LactationClose(BaseModel):
    end_date: dt.date
    total_production: float | None = None


class DryOffCreate(BaseModel):
    animal_id: UUID
    date: dt.date
    pregnancy_id: UUID | None = None
    expected_calving_date: dt.date | None = None
    protocol: str | None = None
    reason: str | None = None
    notes: str | None = None

    @field_validator("reason")
    def normalize_codes(cls, v):
        return v.strip().upper() if v else v


class DryOffResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    animal_id: UUID
    date: dt.date
    pregnancy_id: UUID | None
    expected_calving_date: dt.date | None
    protocol: str | None
    reason: str | None
    notes: str | None
