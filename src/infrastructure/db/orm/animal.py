from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Float, ForeignKey, Index, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (
        Index("ix_animals_farm_category", "farm_id", "category"),
        Index("ix_animals_farm_reproductive_status", "farm_id", "reproductive_status"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    # Unique across every farm
    identification: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    sex: Mapped[str | None] = mapped_column(String(1), nullable=True)
    health_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)
    reproductive_status: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Weak reference: the mother may live outside the registry
    mother_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    sire_info: Mapped[str | None] = mapped_column(String(255), nullable=True)
    current_pen_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("pens.id"), nullable=True
    )
    birth_weight: Mapped[float | None] = mapped_column(Float, nullable=True)

    entry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    exit_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    exit_reason: Mapped[str | None] = mapped_column(String(32), nullable=True)
    acquisition_origin: Mapped[str | None] = mapped_column(String(32), nullable=True)

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
