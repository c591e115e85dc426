from __future__ import annotations

from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.pregnancies import (
    PregnanciesRepository,
    PregnancyDiagnosesRepository,
)
from src.domain.models.pregnancy import Pregnancy
from src.domain.models.pregnancy_diagnosis import PregnancyDiagnosis
from src.infrastructure.db.orm.pregnancy import PregnancyDiagnosisORM, PregnancyORM


class PregnancyDiagnosesSQLAlchemyRepository(PregnancyDiagnosesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PregnancyDiagnosisORM) -> PregnancyDiagnosis:
        return PregnancyDiagnosis(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            date=orm.date,
            result=orm.result,
            breeding_id=orm.breeding_id,
            estimated_days=orm.estimated_days,
            method=orm.method,
            veterinarian=orm.veterinarian,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, diagnosis: PregnancyDiagnosis) -> PregnancyDiagnosis:
        orm = PregnancyDiagnosisORM(
            id=diagnosis.id,
            farm_id=diagnosis.farm_id,
            animal_id=diagnosis.animal_id,
            date=diagnosis.date,
            result=diagnosis.result,
            breeding_id=diagnosis.breeding_id,
            estimated_days=diagnosis.estimated_days,
            method=diagnosis.method,
            veterinarian=diagnosis.veterinarian,
            notes=diagnosis.notes,
            created_at=diagnosis.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to record pregnancy diagnosis") from exc
        return self._to_domain(orm)

    async def list(
        self, farm_id: UUID, *, animal_id: UUID | None = None
    ) -> list[PregnancyDiagnosis]:
        stmt = select(PregnancyDiagnosisORM).where(PregnancyDiagnosisORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(PregnancyDiagnosisORM.animal_id == animal_id)
        stmt = stmt.order_by(desc(PregnancyDiagnosisORM.date))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]


class PregnanciesSQLAlchemyRepository(PregnanciesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PregnancyORM) -> Pregnancy:
        return Pregnancy(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            breeding_id=orm.breeding_id,
            confirmation_date=orm.confirmation_date,
            due_date=orm.due_date,
            status=orm.status,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, pregnancy: Pregnancy) -> Pregnancy:
        orm = PregnancyORM(
            id=pregnancy.id,
            farm_id=pregnancy.farm_id,
            animal_id=pregnancy.animal_id,
            breeding_id=pregnancy.breeding_id,
            confirmation_date=pregnancy.confirmation_date,
            due_date=pregnancy.due_date,
            status=pregnancy.status,
            notes=pregnancy.notes,
            created_at=pregnancy.created_at,
            updated_at=pregnancy.updated_at,
            version=pregnancy.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create pregnancy") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, pregnancy_id: UUID) -> Pregnancy | None:
        stmt = select(PregnancyORM).where(
            PregnancyORM.farm_id == farm_id, PregnancyORM.id == pregnancy_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        status: str | None = None,
    ) -> list[Pregnancy]:
        stmt = select(PregnancyORM).where(PregnancyORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(PregnancyORM.animal_id == animal_id)
        if status is not None:
            stmt = stmt.where(PregnancyORM.status == status)
        stmt = stmt.order_by(desc(PregnancyORM.confirmation_date))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, pregnancy: Pregnancy) -> Pregnancy:
        orm = await self.session.get(PregnancyORM, pregnancy.id)
        if not orm or orm.farm_id != pregnancy.farm_id:
            raise NotFound(f"Pregnancy {pregnancy.id} not found")
        # due_date is fixed at confirmation
        orm.status = pregnancy.status
        orm.notes = pregnancy.notes
        orm.updated_at = pregnancy.updated_at
        orm.version = pregnancy.version
        await self.session.flush()
        return self._to_domain(orm)
