from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class PenBase(BaseModel):
    name: str
    type: str | None = None
    description: str | None = None
    active: bool = True

    @field_validator("type")
    def normalize_type(cls, v):
        return v.strip().upper() if v else v


class PenCreate(PenBase):
    pass


class PenUpdate(BaseModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    active: bool | None = None

    @field_validator("type")
    def normalize_type(cls, v):
        return v.strip().upper() if v else v


class PenResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    name: str
    type: str | None
    description: str | None
    active: bool
    created_at: datetime
