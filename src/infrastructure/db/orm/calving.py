from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Float, ForeignKey, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class CalvingORM(Base):
    __tablename__ = "calvings"
    __table_args__ = (Index("ix_calvings_farm_animal_date", "farm_id", "animal_id", "date"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    offspring_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    pregnancy_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    type: Mapped[str | None] = mapped_column(String(16), nullable=True)
    complications: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class OffspringORM(Base):
    __tablename__ = "offspring"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    calving_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("calvings.id"), nullable=False, index=True
    )
    animal_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=True
    )
    sex: Mapped[str] = mapped_column(String(1), nullable=False)
    condition: Mapped[str] = mapped_column(String(16), nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class DryOffORM(Base):
    __tablename__ = "dry_offs"
    __table_args__ = (Index("ix_dry_offs_farm_animal", "farm_id", "animal_id"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    pregnancy_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    expected_calving_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    protocol: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reason: Mapped[str | None] = mapped_column(String(32), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
