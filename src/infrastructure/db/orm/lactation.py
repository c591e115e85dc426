from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class LactationORM(Base):
    __tablename__ = "lactations"
    __table_args__ = (
        Index("ix_lactations_farm_animal", "farm_id", "animal_id"),
        Index("ix_lactations_farm_status", "farm_id", "status"),
        # Two calvings racing for the same number: the loser retries
        UniqueConstraint("animal_id", "number", name="ux_lactations_animal_number"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    number: Mapped[int] = mapped_column(Integer, nullable=False)  # lactation number (1, 2, 3...)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="IN_PROGRESS"
    )  # 'IN_PROGRESS' | 'CLOSED'
    calving_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("calvings.id"), nullable=True
    )
    days_in_milk: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_production: Mapped[float | None] = mapped_column(Float, nullable=True)
    daily_average: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
